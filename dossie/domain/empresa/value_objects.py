# dossie/domain/empresa/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

_PESOS_DV1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_PESOS_DV2 = (6, *_PESOS_DV1)


def normalizar_cnpj(entrada: str) -> str:
    """Remove tudo que nao for digito."""
    return "".join(c for c in entrada if c.isdigit())


def _digito_verificador(digitos: str, pesos: tuple[int, ...]) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    digito = 11 - (soma % 11)
    return 0 if digito > 9 else digito


def cnpj_valido(entrada: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ."""
    digitos = normalizar_cnpj(entrada)
    if len(digitos) != 14:
        return False
    if len(set(digitos)) == 1:
        return False
    if _digito_verificador(digitos[:12], _PESOS_DV1) != int(digitos[12]):
        return False
    return _digito_verificador(digitos[:13], _PESOS_DV2) == int(digitos[13])


def formatar_cnpj(entrada: str) -> str:
    """XX.XXX.XXX/XXXX-XX. Melhor esforco: devolve a entrada intacta se nao houver 14 digitos."""
    d = normalizar_cnpj(entrada)
    if len(d) != 14:
        return entrada
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"


@dataclass(frozen=True)
class CNPJ:
    """Value Object imutavel para CNPJ. Valida digitos verificadores no construtor."""

    _valor: str  # sempre 14 digitos sem formatacao

    def __init__(self, raw: str) -> None:
        digitos = normalizar_cnpj(raw)
        if len(digitos) != 14:
            raise ValueError(f"CNPJ invalido: comprimento {len(digitos)}, esperado 14")
        if len(set(digitos)) == 1:
            raise ValueError("CNPJ invalido: todos digitos iguais")
        if not cnpj_valido(digitos):
            raise ValueError("CNPJ invalido: digitos verificadores incorretos")
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        """14 digitos sem formatacao."""
        return self._valor

    @property
    def formatado(self) -> str:
        return formatar_cnpj(self._valor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CNPJ):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


@dataclass(frozen=True)
class CapitalSocial:
    """Valor monetario em Decimal. Nunca negativo. Nunca float."""

    valor: Decimal

    def __post_init__(self) -> None:
        if self.valor < Decimal("0"):
            raise ValueError("Capital social nao pode ser negativo")


@dataclass(frozen=True)
class Endereco:
    logradouro: str
    numero: str
    complemento: str
    bairro: str
    municipio: str
    uf: str
    cep: str

    def linha_unica(self) -> str:
        partes = [
            f"{self.logradouro}, {self.numero}".strip(", "),
            self.complemento,
            self.bairro,
            f"{self.municipio}/{self.uf}".strip("/"),
            self.cep,
        ]
        return " - ".join(p for p in partes if p)
