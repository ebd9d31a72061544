# dossie/interfaces/api/dependencies.py
from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from dossie.application.services.agregacao_service import AgregadorService
from dossie.application.services.dossie_service import DossieService
from dossie.application.services.export_service import ExportService
from dossie.infrastructure.config import Settings
from dossie.infrastructure.provedores.jusbrasil_client import JusBrasilClient
from dossie.infrastructure.provedores.noticias_client import NoticiasClient
from dossie.infrastructure.provedores.receita_client import ReceitaClient


@dataclass(frozen=True)
class Servicos:
    """Tudo que vive do startup ao shutdown. Guardado em app.state.servicos."""
    dossie: DossieService
    export: ExportService
    receita: ReceitaClient
    jusbrasil: JusBrasilClient
    noticias: NoticiasClient

    def fechar(self) -> None:
        self.receita.fechar()
        self.jusbrasil.fechar()
        self.noticias.fechar()


def criar_servicos(settings: Settings) -> Servicos:
    receita = ReceitaClient(settings.receita_api_key, settings.receita_base_url, settings.provedor_timeout)
    jusbrasil = JusBrasilClient(settings.jusbrasil_api_key, settings.jusbrasil_base_url, settings.provedor_timeout)
    noticias = NoticiasClient(settings.noticias_api_key, settings.noticias_base_url, settings.provedor_timeout)
    agregador = AgregadorService(
        provedor_cadastral=receita,
        provedor_juridico=jusbrasil,
        provedor_midia=noticias,
        dados_sinteticos=settings.dados_sinteticos,
    )
    return Servicos(
        dossie=DossieService(agregador),
        export=ExportService(),
        receita=receita,
        jusbrasil=jusbrasil,
        noticias=noticias,
    )


def get_dossie_service(request: Request) -> DossieService:
    return request.app.state.servicos.dossie


def get_export_service(request: Request) -> ExportService:
    return request.app.state.servicos.export
