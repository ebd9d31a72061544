# dossie/domain/relatorio/enums.py
from enum import Enum


class FonteDados(str, Enum):
    """Procedencia de uma secao do dossie."""
    PROVEDOR = "provedor"
    SINTETICO = "sintetico"
    INDISPONIVEL = "indisponivel"
