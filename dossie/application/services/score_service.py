# dossie/application/services/score_service.py
"""Calculo do score de risco. Funcao pura, zero IO.

ADR: Score, alertas e recomendacoes sao dimensoes INDEPENDENTES.
Este modulo NUNCA deve importar os servicos de alertas ou de recomendacoes.
"""

from __future__ import annotations

from decimal import Decimal

from dossie.domain.empresa.entities import Empresa
from dossie.domain.juridico.entities import DadosJuridicos
from dossie.domain.midia.entities import DadosMidia
from dossie.domain.moeda import formatar_moeda
from dossie.domain.risco.enums import TipoPenalidade
from dossie.domain.risco.score import PENALIDADES, TETO_PENALIDADE_PROCESSOS, Penalidade

_RECEITA_MINIMA = Decimal("1000000")
_FUNCIONARIOS_MINIMOS = 50
_LIMITE_RECLAMACOES = 1000
_RESOLUCAO_MINIMA = 70


def calcular_penalidades(
    empresa: Empresa,
    juridico: DadosJuridicos,
    midia: DadosMidia,
) -> tuple[Penalidade, ...]:
    """Funcao pura. Mesma entrada = mesma saida. Zero IO.

    A ordem segue a avaliacao: juridico, financeiro, noticias, reclamacoes, redes.
    """
    penalidades: list[Penalidade] = []

    pen = _avaliar_processos(juridico)
    if pen is not None:
        penalidades.append(pen)

    penalidades.extend(_avaliar_financeiro(empresa))

    pen = _avaliar_noticias_negativas(midia)
    if pen is not None:
        penalidades.append(pen)

    penalidades.extend(_avaliar_reclamacoes(midia))

    pen = _avaliar_redes_sociais(midia)
    if pen is not None:
        penalidades.append(pen)

    return tuple(penalidades)


def _avaliar_processos(juridico: DadosJuridicos) -> Penalidade | None:
    """PROCESSOS_JUDICIAIS: 3 pontos por processo, teto de 30."""
    qtd = len(juridico.processos)
    if qtd == 0:
        return None
    pontos = min(qtd * PENALIDADES[TipoPenalidade.PROCESSOS_JUDICIAIS], TETO_PENALIDADE_PROCESSOS)
    return Penalidade(
        tipo=TipoPenalidade.PROCESSOS_JUDICIAIS,
        pontos=pontos,
        descricao=f"{qtd} processo(s) judicial(is)",
    )


def _avaliar_financeiro(empresa: Empresa) -> list[Penalidade]:
    """PREJUIZO, RECEITA_BAIXA e POUCOS_FUNCIONARIOS. Sem dados financeiros = fail-safe."""
    fin = empresa.financeiro
    if fin is None:
        return []

    penalidades: list[Penalidade] = []
    if fin.lucro < 0:
        penalidades.append(Penalidade(
            tipo=TipoPenalidade.PREJUIZO,
            pontos=PENALIDADES[TipoPenalidade.PREJUIZO],
            descricao=f"Prejuizo de {formatar_moeda(-fin.lucro)}",
        ))
    if fin.receita < _RECEITA_MINIMA:
        penalidades.append(Penalidade(
            tipo=TipoPenalidade.RECEITA_BAIXA,
            pontos=PENALIDADES[TipoPenalidade.RECEITA_BAIXA],
            descricao=f"Receita de {formatar_moeda(fin.receita)} abaixo de {formatar_moeda(_RECEITA_MINIMA)}",
        ))
    if fin.funcionarios < _FUNCIONARIOS_MINIMOS:
        penalidades.append(Penalidade(
            tipo=TipoPenalidade.POUCOS_FUNCIONARIOS,
            pontos=PENALIDADES[TipoPenalidade.POUCOS_FUNCIONARIOS],
            descricao=f"{fin.funcionarios} funcionario(s)",
        ))
    return penalidades


def _avaliar_noticias_negativas(midia: DadosMidia) -> Penalidade | None:
    """NOTICIAS_NEGATIVAS: 5 pontos por noticia negativa, sem teto (o score satura em 0)."""
    negativas = midia.noticias_negativas
    if negativas == 0:
        return None
    return Penalidade(
        tipo=TipoPenalidade.NOTICIAS_NEGATIVAS,
        pontos=negativas * PENALIDADES[TipoPenalidade.NOTICIAS_NEGATIVAS],
        descricao=f"{negativas} noticia(s) negativa(s)",
    )


def _avaliar_reclamacoes(midia: DadosMidia) -> list[Penalidade]:
    """VOLUME_RECLAMACOES (> 1000) e BAIXA_RESOLUCAO (media < 70%)."""
    penalidades: list[Penalidade] = []
    total = midia.total_reclamacoes
    if total > _LIMITE_RECLAMACOES:
        penalidades.append(Penalidade(
            tipo=TipoPenalidade.VOLUME_RECLAMACOES,
            pontos=PENALIDADES[TipoPenalidade.VOLUME_RECLAMACOES],
            descricao=f"{total} reclamacoes registradas",
        ))

    media = midia.resolucao_media
    if media is not None and media < _RESOLUCAO_MINIMA:
        penalidades.append(Penalidade(
            tipo=TipoPenalidade.BAIXA_RESOLUCAO,
            pontos=PENALIDADES[TipoPenalidade.BAIXA_RESOLUCAO],
            descricao=f"Resolucao media de {media:.0f}% das reclamacoes",
        ))
    return penalidades


def _avaliar_redes_sociais(midia: DadosMidia) -> Penalidade | None:
    """REDES_SOCIAIS_NEGATIVAS: 3 pontos por plataforma com sentimento negativo."""
    negativas = midia.redes_negativas
    if negativas == 0:
        return None
    return Penalidade(
        tipo=TipoPenalidade.REDES_SOCIAIS_NEGATIVAS,
        pontos=negativas * PENALIDADES[TipoPenalidade.REDES_SOCIAIS_NEGATIVAS],
        descricao=f"{negativas} plataforma(s) com sentimento negativo",
    )
