# dossie/domain/juridico/provedor.py
from __future__ import annotations

from typing import Protocol

from dossie.domain.empresa.value_objects import CNPJ

from .entities import DadosJuridicos


class ProvedorJuridico(Protocol):
    def buscar_dados_juridicos(self, cnpj: CNPJ) -> DadosJuridicos: ...
