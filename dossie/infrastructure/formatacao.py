# dossie/infrastructure/formatacao.py
"""Formatacao pt-BR para os documentos. Funcoes puras, aceitam os tipos do dominio
ou as strings ISO/decimais dos DTOs."""
from __future__ import annotations

from datetime import date, datetime

from dossie.domain.moeda import trocar_separadores

MESES = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)


def formatar_inteiro(valor: int) -> str:
    """30000 -> '30.000'."""
    return trocar_separadores(f"{valor:,d}")


def _como_data(valor: date | datetime | str) -> datetime:
    if isinstance(valor, datetime):
        return valor
    if isinstance(valor, date):
        return datetime(valor.year, valor.month, valor.day)
    return datetime.fromisoformat(valor)


def formatar_data(valor: date | datetime | str | None) -> str:
    if valor is None or valor == "":
        return "-"
    return _como_data(valor).strftime("%d/%m/%Y")


def formatar_data_extenso(valor: date | datetime | str) -> str:
    """'2026-10-19T14:30:00' -> '19 de outubro de 2026 às 14:30'."""
    momento = _como_data(valor)
    return f"{momento.day} de {MESES[momento.month - 1]} de {momento.year} às {momento:%H:%M}"
