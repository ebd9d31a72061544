# dossie/domain/exceptions.py
from __future__ import annotations


class ProvedorIndisponivel(Exception):
    """Falha de consulta a um provedor externo. Sempre convertida em fallback pelo agregador."""

    def __init__(self, provedor: str, motivo: str) -> None:
        super().__init__(f"{provedor}: {motivo}")
        self.provedor = provedor
        self.motivo = motivo
