# dossie/application/errors.py
from __future__ import annotations

from typing import Any

MISSING_CNPJ = "MISSING_CNPJ"
INVALID_CNPJ = "INVALID_CNPJ"
PROCESSING_ERROR = "PROCESSING_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"
VALIDATION_ERROR = "VALIDATION_ERROR"
PDF_UNAVAILABLE = "PDF_UNAVAILABLE"


class ErroAplicacao(Exception):
    """Erro com codigo e status HTTP. Convertido no envelope {error, code, details} pela API."""

    def __init__(
        self,
        mensagem: str,
        codigo: str,
        status: int = 500,
        detalhes: Any = None,
    ) -> None:
        super().__init__(mensagem)
        self.mensagem = mensagem
        self.codigo = codigo
        self.status = status
        self.detalhes = detalhes
