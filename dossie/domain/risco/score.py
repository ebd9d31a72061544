# dossie/domain/risco/score.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .enums import FaixaRisco, Prioridade, Severidade, TipoPenalidade

# ADR: escala unica 0-100 em todo o sistema. Quanto maior, menor o risco.
ESCALA_MAXIMA = 100
SCORE_BASE = 70

# ADR: Pesos como constante de modulo, nao hardcoded em funcoes.
# Processos e noticias/redes sao por item; os demais sao fixos.
PENALIDADES: dict[TipoPenalidade, int] = {
    TipoPenalidade.PROCESSOS_JUDICIAIS: 3,
    TipoPenalidade.PREJUIZO: 15,
    TipoPenalidade.RECEITA_BAIXA: 10,
    TipoPenalidade.POUCOS_FUNCIONARIOS: 5,
    TipoPenalidade.NOTICIAS_NEGATIVAS: 5,
    TipoPenalidade.VOLUME_RECLAMACOES: 10,
    TipoPenalidade.BAIXA_RESOLUCAO: 10,
    TipoPenalidade.REDES_SOCIAIS_NEGATIVAS: 3,
}
TETO_PENALIDADE_PROCESSOS = 30


@dataclass(frozen=True)
class Penalidade:
    """Um sinal de risco aplicado ao score. Pontos ja multiplicados e com teto."""

    tipo: TipoPenalidade
    pontos: int
    descricao: str


@dataclass(frozen=True)
class Alerta:
    severidade: Severidade
    mensagem: str
    detalhe: str | None = None


@dataclass(frozen=True)
class Recomendacao:
    prioridade: Prioridade
    mensagem: str
    acao: str | None = None


@dataclass(frozen=True)
class AnaliseDeRisco:
    """Resultado da analise. Imutavel, derivado de penalidades, alertas e recomendacoes."""

    penalidades: tuple[Penalidade, ...]
    alertas: tuple[Alerta, ...]
    recomendacoes: tuple[Recomendacao, ...]
    calculado_em: datetime

    @property
    def valor(self) -> int:
        """Base menos penalidades, limitado a [0, 100]."""
        bruto = SCORE_BASE - sum(p.pontos for p in self.penalidades)
        return max(0, min(ESCALA_MAXIMA, bruto))

    @property
    def faixa(self) -> FaixaRisco:
        v = self.valor
        if v >= 60:
            return FaixaRisco.BAIXO
        if v >= 40:
            return FaixaRisco.MODERADO
        return FaixaRisco.ALTO
