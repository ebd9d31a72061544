# dossie/application/services/recomendacao_service.py
"""Recomendacoes ao analista. Funcao pura, zero IO, mensagens fixas em portugues.

Mesmo padrao dos alertas: verificacoes independentes, ordem = ordem de avaliacao.
"""
from __future__ import annotations

from decimal import Decimal

from dossie.domain.empresa.entities import Empresa
from dossie.domain.juridico.entities import DadosJuridicos
from dossie.domain.midia.entities import DadosMidia
from dossie.domain.risco.enums import Prioridade
from dossie.domain.risco.score import Recomendacao

_MINIMO_NOTICIAS = 5
_CAPITAL_MINIMO = Decimal("10000")


def gerar_recomendacoes(
    empresa: Empresa,
    juridico: DadosJuridicos,
    midia: DadosMidia,
) -> list[Recomendacao]:
    recomendacoes: list[Recomendacao] = []

    if juridico.processos:
        recomendacoes.append(Recomendacao(
            prioridade=Prioridade.ALTA,
            mensagem="Processos Judiciais Ativos",
            acao="Avalie os processos judiciais ativos e considere a possibilidade de negociação ou defesa.",
        ))

    if empresa.financeiro is not None and empresa.financeiro.lucro < 0:
        recomendacoes.append(Recomendacao(
            prioridade=Prioridade.MEDIA,
            mensagem="Melhorar a Estratégia de Negócios",
            acao="Avalie as estratégias de negócios e a estrutura de custos.",
        ))

    if len(midia.noticias) < _MINIMO_NOTICIAS:
        recomendacoes.append(Recomendacao(
            prioridade=Prioridade.BAIXA,
            mensagem="Ampliar a Pesquisa de Reputação",
            acao="Poucas notícias encontradas; consulte fontes adicionais antes de concluir a análise.",
        ))

    if midia.total_reclamacoes > 0:
        recomendacoes.append(Recomendacao(
            prioridade=Prioridade.MEDIA,
            mensagem="Analisar reclamações e propor melhorias",
            acao="Implementar plano de gestão de reclamações.",
        ))

    if empresa.capital_social.valor < _CAPITAL_MINIMO:
        recomendacoes.append(Recomendacao(
            prioridade=Prioridade.BAIXA,
            mensagem="Avaliar capital social da empresa",
            acao="Considerar aumento do capital social.",
        ))

    return recomendacoes
