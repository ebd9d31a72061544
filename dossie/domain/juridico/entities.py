# dossie/domain/juridico/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Processo:
    numero: str
    tribunal: str
    tipo: str
    status: str
    data: date
    valor: Decimal = Decimal("0")
    partes: tuple[str, ...] = ()


@dataclass(frozen=True)
class MandadoJudicial:
    numero: str
    tribunal: str
    tipo: str
    status: str
    data: date


@dataclass(frozen=True)
class Falencia:
    status: str
    data: date
    tribunal: str


@dataclass(frozen=True)
class DadosJuridicos:
    processos: tuple[Processo, ...] = ()
    mandados: tuple[MandadoJudicial, ...] = ()
    falencia: Falencia | None = None  # None = sem processo de falencia

    @classmethod
    def vazio(cls) -> DadosJuridicos:
        return cls()
