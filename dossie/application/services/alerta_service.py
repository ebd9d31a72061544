# dossie/application/services/alerta_service.py
"""Geracao de alertas. Funcao pura, zero IO.

ADR: Score e Alertas sao dimensoes INDEPENDENTES.
Este modulo NUNCA deve importar o servico de score.

Cada verificacao e independente; a ordem da lista segue a ordem de avaliacao,
nao a severidade.
"""
from __future__ import annotations

from dossie.domain.empresa.entities import Empresa
from dossie.domain.juridico.entities import DadosJuridicos
from dossie.domain.midia.entities import DadosMidia
from dossie.domain.moeda import formatar_moeda
from dossie.domain.risco.enums import Severidade
from dossie.domain.risco.score import Alerta

_LIMITE_PROCESSOS = 5
_LIMITE_NOTICIAS_NEGATIVAS = 3
_LIMITE_FUNCIONARIOS = 10


def gerar_alertas(
    empresa: Empresa,
    juridico: DadosJuridicos,
    midia: DadosMidia,
) -> list[Alerta]:
    """Funcao pura. Mesma entrada = mesma saida. Zero IO."""
    alertas: list[Alerta] = []

    qtd_processos = len(juridico.processos)
    if qtd_processos > _LIMITE_PROCESSOS:
        alertas.append(Alerta(
            severidade=Severidade.ALTA,
            mensagem="Alto número de processos judiciais ativos",
            detalhe=f"{qtd_processos} processos encontrados",
        ))

    fin = empresa.financeiro
    if fin is not None and fin.lucro < 0:
        alertas.append(Alerta(
            severidade=Severidade.ALTA,
            mensagem="Prejuízo reportado",
            detalhe=f"Lucro atual: {formatar_moeda(fin.lucro)}",
        ))

    negativas = midia.noticias_negativas
    if negativas > _LIMITE_NOTICIAS_NEGATIVAS:
        alertas.append(Alerta(
            severidade=Severidade.MEDIA,
            mensagem="Múltiplas notícias negativas",
            detalhe=f"{negativas} notícias negativas recentes na mídia",
        ))

    if fin is not None and fin.funcionarios < _LIMITE_FUNCIONARIOS:
        alertas.append(Alerta(
            severidade=Severidade.BAIXA,
            mensagem="Empresa de pequeno porte",
            detalhe=f"{fin.funcionarios} funcionário(s) informado(s)",
        ))

    if juridico.falencia is not None:
        alertas.append(Alerta(
            severidade=Severidade.ALTA,
            mensagem="Empresa em processo de falência",
            detalhe=f"Status: {juridico.falencia.status} ({juridico.falencia.tribunal})",
        ))

    if not empresa.ativa:
        alertas.append(Alerta(
            severidade=Severidade.ALTA,
            mensagem="Empresa não está ativa",
            detalhe=f"Situação cadastral: {empresa.situacao}",
        ))

    return alertas
