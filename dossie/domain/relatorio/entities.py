# dossie/domain/relatorio/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from dossie.domain.empresa.entities import Empresa
from dossie.domain.juridico.entities import DadosJuridicos
from dossie.domain.midia.entities import DadosMidia
from dossie.domain.risco.score import AnaliseDeRisco

from .enums import FonteDados

AVISO_LEGAL = (
    "Relatorio gerado automaticamente a partir de provedores de dados publicos. "
    "Secoes marcadas como sinteticas contem dados simulados para demonstracao. "
    "Nao constitui recomendacao de credito ou investimento."
)


@dataclass(frozen=True)
class Procedencia:
    empresa: FonteDados
    juridico: FonteDados
    midia: FonteDados

    @property
    def possui_dados_simulados(self) -> bool:
        return FonteDados.SINTETICO in (self.empresa, self.juridico, self.midia)


@dataclass(frozen=True)
class DadosAgregados:
    """Saida do agregador: as tres secoes e a procedencia de cada uma."""
    empresa: Empresa
    juridico: DadosJuridicos
    midia: DadosMidia
    procedencia: Procedencia


@dataclass(frozen=True)
class Dossie:
    """Criado uma vez por requisicao. Nunca persistido."""
    empresa: Empresa
    juridico: DadosJuridicos
    midia: DadosMidia
    risco: AnaliseDeRisco
    procedencia: Procedencia
    gerado_em: datetime
    aviso_legal: str = AVISO_LEGAL
