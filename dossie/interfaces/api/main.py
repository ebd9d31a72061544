# dossie/interfaces/api/main.py
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dossie.application.dtos.dossie_dto import ErroDTO
from dossie.application.errors import INTERNAL_ERROR, VALIDATION_ERROR, ErroAplicacao
from dossie.infrastructure.config import get_settings
from dossie.interfaces.api.dependencies import criar_servicos

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Settings relidas no startup: testes limpam o cache antes de abrir o TestClient
    config = get_settings()
    app.state.settings = config
    app.state.servicos = criar_servicos(config)
    logger.info(
        "Dossie API iniciada (receita=%s, jusbrasil=%s, noticias=%s, dados_sinteticos=%s)",
        bool(config.receita_api_key),
        bool(config.jusbrasil_api_key),
        bool(config.noticias_api_key),
        config.dados_sinteticos,
    )
    yield
    app.state.servicos.fechar()


app = FastAPI(
    title="Dossie CNPJ API",
    debug=False,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


def _erro(status: int, erro: ErroDTO) -> JSONResponse:
    return JSONResponse(status_code=status, content=erro.model_dump())


@app.exception_handler(ErroAplicacao)
async def erro_aplicacao_handler(request: Request, exc: ErroAplicacao) -> JSONResponse:
    return _erro(exc.status, ErroDTO(error=exc.mensagem, code=exc.codigo, details=exc.detalhes))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detalhes = [
        {"field": ".".join(str(loc) for loc in e["loc"]), "message": e["msg"]}
        for e in exc.errors()
    ]
    return _erro(422, ErroDTO(error="Requisicao invalida", code=VALIDATION_ERROR, details=detalhes))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Erro nao tratado em %s: %s", request.url.path, exc, exc_info=True)
    return _erro(
        500,
        ErroDTO(
            error="Erro interno do servidor",
            code=INTERNAL_ERROR,
            details=str(exc) if settings.debug else None,
        ),
    )


from dossie.interfaces.api.routes.dossie_routes import router as dossie_router  # noqa: E402
from dossie.interfaces.api.routes.health_routes import router as health_router  # noqa: E402

app.include_router(dossie_router, prefix="/api")
app.include_router(health_router, prefix="/api")
