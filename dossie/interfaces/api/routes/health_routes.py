# dossie/interfaces/api/routes/health_routes.py
from typing import Any

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health(request: Request) -> dict[str, Any]:
    settings = request.app.state.settings
    return {
        "status": "ok",
        "provedores": {
            "receita": bool(settings.receita_api_key),
            "jusbrasil": bool(settings.jusbrasil_api_key),
            "noticias": bool(settings.noticias_api_key),
        },
        "dados_sinteticos": settings.dados_sinteticos,
    }
