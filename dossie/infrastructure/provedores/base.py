# dossie/infrastructure/provedores/base.py
#
# Base comum dos clientes HTTP de provedores externos.
#
# Design decisions:
#   - Um httpx.Client por provedor, criado uma vez no startup e reaproveitado
#     entre requisicoes. Testes injetam um Client com httpx.MockTransport.
#   - Toda falha (credencial ausente, rede, status != 2xx, JSON invalido,
#     payload fora do formato) vira ProvedorIndisponivel. O agregador decide
#     o fallback; o cliente nunca devolve dado inventado.
#   - Credencial ausente falha ANTES de qualquer chamada de rede.
#   - Sem retry: uma tentativa por requisicao.
from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any

import httpx

from dossie.domain.exceptions import ProvedorIndisponivel

logger = logging.getLogger(__name__)

# Payload 2xx fora do formato esperado; o cliente converte em ProvedorIndisponivel
ERROS_DE_FORMATO = (KeyError, TypeError, ValueError, AttributeError, ArithmeticError)


class ClienteProvedor:
    nome = "provedor"

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 30.0,
        http: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout, follow_redirects=True)

    def fechar(self) -> None:
        self._http.close()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}", "Accept": "application/json"}

    def _get_json(self, caminho: str, params: dict[str, str] | None = None) -> Any:
        if not self._api_key:
            raise ProvedorIndisponivel(self.nome, "credencial nao configurada")

        logger.debug("%s: GET %s", self.nome, caminho)
        try:
            response = self._http.get(caminho, params=params, headers=self._headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as err:
            raise ProvedorIndisponivel(self.nome, f"HTTP {err.response.status_code}") from err
        except httpx.HTTPError as err:
            raise ProvedorIndisponivel(self.nome, f"falha de rede: {err}") from err

        try:
            return response.json()
        except ValueError as err:
            raise ProvedorIndisponivel(self.nome, "resposta nao e JSON") from err


def parse_data(valor: Any) -> date | None:
    """Aceita 'AAAA-MM-DD' ou timestamp ISO. Vazio/None -> None."""
    if not valor:
        return None
    texto = str(valor).strip()
    if "T" in texto:
        return datetime.fromisoformat(texto.replace("Z", "+00:00")).date()
    return date.fromisoformat(texto[:10])


def parse_data_obrigatoria(valor: Any) -> date:
    data = parse_data(valor)
    if data is None:
        raise ValueError("data ausente")
    return data


def parse_decimal(valor: Any, padrao: Decimal = Decimal("0")) -> Decimal:
    """Rejeita NaN e infinito: comparacoes com eles levantam InvalidOperation no dominio."""
    if valor is None or valor == "":
        return padrao
    if isinstance(valor, (bool, dict, list)):
        raise TypeError(f"valor monetario invalido: {valor!r}")
    try:
        numero = Decimal(str(valor))
    except ArithmeticError as err:
        raise ValueError(f"valor monetario invalido: {valor!r}") from err
    if not numero.is_finite():
        raise ValueError(f"valor monetario invalido: {valor!r}")
    return numero


def parse_texto(valor: Any, padrao: str = "") -> str:
    """Campo textual do payload. Numeros viram texto; objetos e listas sao formato invalido."""
    if valor is None or valor == "":
        return padrao
    if isinstance(valor, (dict, list)):
        raise TypeError(f"texto esperado, recebido {type(valor).__name__}")
    return str(valor)
