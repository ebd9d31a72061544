# dossie/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _bool_env(nome: str, padrao: str = "false") -> bool:
    return os.environ.get(nome, padrao).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Credencial vazia = provedor indisponivel (fallback), nunca erro de startup."""
    receita_api_key: str
    receita_base_url: str
    jusbrasil_api_key: str
    jusbrasil_base_url: str
    noticias_api_key: str
    noticias_base_url: str
    provedor_timeout: float
    dados_sinteticos: bool
    cors_origins: tuple[str, ...]
    log_level: str
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        receita_api_key=os.environ.get("RECEITA_API_KEY", ""),
        receita_base_url=os.environ.get("RECEITA_BASE_URL", "https://publica.cnpj.ws"),
        jusbrasil_api_key=os.environ.get("JUSBRASIL_API_KEY", ""),
        jusbrasil_base_url=os.environ.get("JUSBRASIL_BASE_URL", "https://api.jusbrasil.com.br"),
        noticias_api_key=os.environ.get("NEWS_API_KEY", ""),
        noticias_base_url=os.environ.get("NEWS_BASE_URL", "https://newsapi.org"),
        provedor_timeout=float(os.environ.get("PROVEDOR_TIMEOUT_SEGUNDOS", "30")),
        dados_sinteticos=_bool_env("DOSSIE_DADOS_SINTETICOS"),
        cors_origins=tuple(
            o.strip() for o in os.environ.get("API_CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()
        ),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        debug=_bool_env("API_DEBUG"),
    )
