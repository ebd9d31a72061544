# dossie/domain/midia/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .enums import Sentimento


@dataclass(frozen=True)
class Noticia:
    titulo: str
    fonte: str
    data: date
    url: str
    sentimento: Sentimento = Sentimento.NEUTRO
    resumo: str = ""


@dataclass(frozen=True)
class MencaoRedeSocial:
    """Resumo de mencoes em uma plataforma."""
    plataforma: str
    mencoes: int
    sentimento: Sentimento
    ultima_mencao: date


@dataclass(frozen=True)
class DetalheReclamacoes:
    resolvidas: int
    pendentes: int
    nao_resolvidas: int
    tempo_medio_resposta: str  # ex.: "36h"


@dataclass(frozen=True)
class Reclamacoes:
    """Resumo de reclamacoes em uma fonte (Reclame Aqui, consumidor.gov.br)."""
    fonte: str
    quantidade: int
    ultima_reclamacao: date
    url: str
    status: str
    percentual_resolucao: int  # 0-100
    detalhes: DetalheReclamacoes


@dataclass(frozen=True)
class DadosMidia:
    noticias: tuple[Noticia, ...] = ()
    redes_sociais: tuple[MencaoRedeSocial, ...] = ()
    reclamacoes: tuple[Reclamacoes, ...] = ()

    @classmethod
    def vazio(cls) -> DadosMidia:
        return cls()

    @property
    def noticias_negativas(self) -> int:
        return sum(1 for n in self.noticias if n.sentimento is Sentimento.NEGATIVO)

    @property
    def redes_negativas(self) -> int:
        return sum(1 for r in self.redes_sociais if r.sentimento is Sentimento.NEGATIVO)

    @property
    def total_reclamacoes(self) -> int:
        return sum(r.quantidade for r in self.reclamacoes)

    @property
    def resolucao_media(self) -> float | None:
        """Media simples do percentual de resolucao. None sem fontes."""
        if not self.reclamacoes:
            return None
        return sum(r.percentual_resolucao for r in self.reclamacoes) / len(self.reclamacoes)
