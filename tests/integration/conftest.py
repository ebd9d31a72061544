# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Sem credenciais: todo provedor falha antes da rede e o agregador usa os substitutos
for _var in ("RECEITA_API_KEY", "JUSBRASIL_API_KEY", "NEWS_API_KEY"):
    os.environ[_var] = ""
os.environ["DOSSIE_DADOS_SINTETICOS"] = "false"


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com provedores indisponiveis."""
    # Limpar cache de settings para pegar as variaveis acima
    from dossie.infrastructure.config import get_settings
    get_settings.cache_clear()

    from dossie.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
