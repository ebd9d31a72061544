# dossie/domain/empresa/provedor.py
from __future__ import annotations

from typing import Protocol

from .entities import Empresa
from .value_objects import CNPJ


class ProvedorCadastral(Protocol):
    """Levanta ProvedorIndisponivel em qualquer falha."""
    def buscar_empresa(self, cnpj: CNPJ) -> Empresa: ...
