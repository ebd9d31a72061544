# dossie/application/dtos/empresa_dto.py
from pydantic import BaseModel


class EnderecoDTO(BaseModel):
    logradouro: str
    numero: str
    complemento: str
    bairro: str
    municipio: str
    uf: str
    cep: str


class SocioDTO(BaseModel):
    nome: str
    documento: str
    qualificacao: str


class AtividadeDTO(BaseModel):
    codigo: str
    descricao: str
    principal: bool


class FinanceiroDTO(BaseModel):
    receita: str
    lucro: str
    funcionarios: int
    atualizado_em: str


class ParceriaDTO(BaseModel):
    empresa: str
    tipo: str
    data: str | None
    descricao: str
