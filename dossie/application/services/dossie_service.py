# dossie/application/services/dossie_service.py
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from dossie.domain.empresa.value_objects import CNPJ
from dossie.domain.relatorio.entities import AVISO_LEGAL, DadosAgregados, Dossie
from dossie.domain.risco.score import AnaliseDeRisco

from ..dtos.dossie_dto import DossieDTO
from ..errors import INVALID_CNPJ, MISSING_CNPJ, PROCESSING_ERROR, ErroAplicacao
from .agregacao_service import AgregadorService
from .risco_service import analisar_risco

logger = logging.getLogger(__name__)


def montar_dossie(
    dados: DadosAgregados,
    risco: AnaliseDeRisco,
    gerado_em: datetime,
) -> Dossie:
    """Composicao pura, sem regra de negocio."""
    return Dossie(
        empresa=dados.empresa,
        juridico=dados.juridico,
        midia=dados.midia,
        risco=risco,
        procedencia=dados.procedencia,
        gerado_em=gerado_em,
        aviso_legal=AVISO_LEGAL,
    )


def validar_entrada(cnpj_raw: str | None) -> CNPJ:
    """Validacao antes de qualquer chamada a provedor."""
    if cnpj_raw is None or not cnpj_raw.strip():
        raise ErroAplicacao("CNPJ e obrigatorio", MISSING_CNPJ, status=400)
    try:
        return CNPJ(cnpj_raw)
    except ValueError as err:
        raise ErroAplicacao("CNPJ invalido", INVALID_CNPJ, status=400, detalhes=str(err)) from err


class DossieService:
    """Imperative Shell: valida, agrega (IO) e chama o Pure Core (risco)."""

    def __init__(
        self,
        agregador: AgregadorService,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._agregador = agregador
        self._relogio = relogio

    def gerar(self, cnpj_raw: str | None) -> Dossie:
        cnpj = validar_entrada(cnpj_raw)
        try:
            dados = self._agregador.agregar(cnpj)
            agora = self._relogio()
            risco = analisar_risco(dados.empresa, dados.juridico, dados.midia, agora)
        except Exception as err:
            logger.exception("Falha ao processar CNPJ %s", cnpj)
            raise ErroAplicacao(
                "Falha ao processar CNPJ", PROCESSING_ERROR, status=500, detalhes=str(err)
            ) from err

        dossie = montar_dossie(dados, risco, agora)
        logger.info(
            "Dossie gerado para %s: score=%d empresa=%s juridico=%s midia=%s",
            cnpj,
            risco.valor,
            dados.procedencia.empresa.value,
            dados.procedencia.juridico.value,
            dados.procedencia.midia.value,
        )
        return dossie

    def obter_dossie(self, cnpj_raw: str | None) -> DossieDTO:
        dossie = self.gerar(cnpj_raw)
        try:
            return DossieDTO.from_domain(dossie)
        except ValueError as err:
            # pydantic.ValidationError e subclasse de ValueError
            logger.exception("Falha ao montar contrato do dossie %s", dossie.empresa.cnpj)
            raise ErroAplicacao(
                "Falha ao processar CNPJ", PROCESSING_ERROR, status=500, detalhes=str(err)
            ) from err
