# dossie/domain/midia/provedor.py
from __future__ import annotations

from typing import Protocol

from dossie.domain.empresa.value_objects import CNPJ

from .entities import DadosMidia


class ProvedorMidia(Protocol):
    def buscar_dados_midia(self, cnpj: CNPJ, razao_social: str) -> DadosMidia: ...
