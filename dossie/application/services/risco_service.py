# dossie/application/services/risco_service.py
"""Modulo autoritativo da analise de risco: junta score, alertas e recomendacoes."""
from __future__ import annotations

from datetime import datetime

from dossie.domain.empresa.entities import Empresa
from dossie.domain.juridico.entities import DadosJuridicos
from dossie.domain.midia.entities import DadosMidia
from dossie.domain.risco.score import AnaliseDeRisco

from .alerta_service import gerar_alertas
from .recomendacao_service import gerar_recomendacoes
from .score_service import calcular_penalidades


def analisar_risco(
    empresa: Empresa,
    juridico: DadosJuridicos,
    midia: DadosMidia,
    calculado_em: datetime,
) -> AnaliseDeRisco:
    return AnaliseDeRisco(
        penalidades=calcular_penalidades(empresa, juridico, midia),
        alertas=tuple(gerar_alertas(empresa, juridico, midia)),
        recomendacoes=tuple(gerar_recomendacoes(empresa, juridico, midia)),
        calculado_em=calculado_em,
    )
