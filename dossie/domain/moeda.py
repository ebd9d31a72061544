# dossie/domain/moeda.py
"""Valores monetarios em pt-BR. Funcao pura, usada pelos detalhes de alertas,
penalidades e pelos documentos exportados."""
from __future__ import annotations

from decimal import Decimal


def trocar_separadores(texto: str) -> str:
    # 1,234,567.89 -> 1.234.567,89
    return texto.replace(",", "_").replace(".", ",").replace("_", ".")


def formatar_moeda(valor: Decimal | int | float | str) -> str:
    """Decimal('1234.5') -> 'R$ 1.234,50'. Negativos: '-R$ 1.234,50'."""
    numero = Decimal(str(valor))
    texto = trocar_separadores(f"{abs(numero):,.2f}")
    return f"-R$ {texto}" if numero < 0 else f"R$ {texto}"
