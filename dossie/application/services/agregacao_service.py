# dossie/application/services/agregacao_service.py
from __future__ import annotations

import logging

from dossie.domain.empresa.entities import Empresa
from dossie.domain.empresa.provedor import ProvedorCadastral
from dossie.domain.empresa.value_objects import CNPJ
from dossie.domain.exceptions import ProvedorIndisponivel
from dossie.domain.juridico.entities import DadosJuridicos
from dossie.domain.juridico.provedor import ProvedorJuridico
from dossie.domain.midia.entities import DadosMidia
from dossie.domain.midia.provedor import ProvedorMidia
from dossie.domain.relatorio.entities import DadosAgregados, Procedencia
from dossie.domain.relatorio.enums import FonteDados

from .dados_sinteticos import DadosVitrine, GeradorSintetico, buscar_vitrine

logger = logging.getLogger(__name__)


class AgregadorService:
    """Imperative Shell: consulta os tres provedores em sequencia
    (cadastro -> juridico -> midia) e aplica o fallback de cada secao.

    Cada provedor e chamado exatamente uma vez. Qualquer ProvedorIndisponivel
    vira dado substituto; nunca ha retry.
    """

    def __init__(
        self,
        provedor_cadastral: ProvedorCadastral,
        provedor_juridico: ProvedorJuridico,
        provedor_midia: ProvedorMidia,
        gerador: GeradorSintetico | None = None,
        dados_sinteticos: bool = False,
    ) -> None:
        self._provedor_cadastral = provedor_cadastral
        self._provedor_juridico = provedor_juridico
        self._provedor_midia = provedor_midia
        self._gerador = gerador or GeradorSintetico()
        # True = juridico/midia sem provedor viram dados gerados em vez de secao vazia
        self._dados_sinteticos = dados_sinteticos

    def agregar(self, cnpj: CNPJ) -> DadosAgregados:
        vitrine = buscar_vitrine(cnpj)

        empresa, fonte_empresa = self._obter_empresa(cnpj, vitrine)
        juridico, fonte_juridico = self._obter_juridico(cnpj, vitrine)
        midia, fonte_midia = self._obter_midia(cnpj, empresa.razao_social, vitrine)

        return DadosAgregados(
            empresa=empresa,
            juridico=juridico,
            midia=midia,
            procedencia=Procedencia(
                empresa=fonte_empresa,
                juridico=fonte_juridico,
                midia=fonte_midia,
            ),
        )

    def _obter_empresa(
        self,
        cnpj: CNPJ,
        vitrine: DadosVitrine | None,
    ) -> tuple[Empresa, FonteDados]:
        try:
            return self._provedor_cadastral.buscar_empresa(cnpj), FonteDados.PROVEDOR
        except ProvedorIndisponivel as err:
            logger.warning("Cadastro indisponivel para %s (%s); usando dados sinteticos", cnpj, err.motivo)
        if vitrine is not None:
            return vitrine.empresa, FonteDados.SINTETICO
        return self._gerador.empresa(cnpj), FonteDados.SINTETICO

    def _obter_juridico(
        self,
        cnpj: CNPJ,
        vitrine: DadosVitrine | None,
    ) -> tuple[DadosJuridicos, FonteDados]:
        try:
            return self._provedor_juridico.buscar_dados_juridicos(cnpj), FonteDados.PROVEDOR
        except ProvedorIndisponivel as err:
            logger.warning("Dados juridicos indisponiveis para %s (%s)", cnpj, err.motivo)
        if vitrine is not None:
            return vitrine.juridico, FonteDados.SINTETICO
        if self._dados_sinteticos:
            return self._gerador.juridico(), FonteDados.SINTETICO
        return DadosJuridicos.vazio(), FonteDados.INDISPONIVEL

    def _obter_midia(
        self,
        cnpj: CNPJ,
        razao_social: str,
        vitrine: DadosVitrine | None,
    ) -> tuple[DadosMidia, FonteDados]:
        try:
            return self._provedor_midia.buscar_dados_midia(cnpj, razao_social), FonteDados.PROVEDOR
        except ProvedorIndisponivel as err:
            logger.warning("Dados de midia indisponiveis para %s (%s)", cnpj, err.motivo)
        if vitrine is not None:
            return vitrine.midia, FonteDados.SINTETICO
        if self._dados_sinteticos:
            return self._gerador.midia(razao_social), FonteDados.SINTETICO
        return DadosMidia.vazio(), FonteDados.INDISPONIVEL
