# dossie/domain/empresa/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .value_objects import CNPJ, CapitalSocial, Endereco

@dataclass(frozen=True)
class Socio:
    nome: str
    documento: str
    qualificacao: str


@dataclass(frozen=True)
class Atividade:
    codigo: str
    descricao: str
    principal: bool = False


@dataclass(frozen=True)
class DadosFinanceiros:
    """Valores em Decimal. Lucro pode ser negativo (prejuizo)."""
    receita: Decimal
    lucro: Decimal
    funcionarios: int
    atualizado_em: date


@dataclass(frozen=True)
class Parceria:
    empresa: str
    tipo: str
    data: date | None
    descricao: str


@dataclass(frozen=True)
class Empresa:
    """Aggregate Root do cadastro. Imutavel, montado pelo agregador a partir
    do provedor cadastral ou dos dados sinteticos."""
    cnpj: CNPJ
    razao_social: str
    natureza_juridica: str
    capital_social: CapitalSocial
    situacao: str
    endereco: Endereco
    data_abertura: date | None = None
    socios: tuple[Socio, ...] = ()
    atividades: tuple[Atividade, ...] = ()
    financeiro: DadosFinanceiros | None = None
    parcerias: tuple[Parceria, ...] = ()

    @property
    def ativa(self) -> bool:
        # Receita devolve "ATIVA", "Ativa", "Ativo"...
        return self.situacao.strip().lower().startswith("ativ")

    @property
    def atividade_principal(self) -> Atividade | None:
        return next((a for a in self.atividades if a.principal), None)
