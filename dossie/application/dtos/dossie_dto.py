# dossie/application/dtos/dossie_dto.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from dossie.domain.relatorio.entities import Dossie

from .empresa_dto import AtividadeDTO, EnderecoDTO, FinanceiroDTO, ParceriaDTO, SocioDTO
from .juridico_dto import JuridicoDTO
from .midia_dto import MidiaDTO
from .risco_dto import RiscoDTO


class ConsultaCNPJDTO(BaseModel):
    """Corpo da requisicao. cnpj opcional para que a ausencia vire MISSING_CNPJ, nao 422."""
    cnpj: str | None = None


class ErroDTO(BaseModel):
    error: str
    code: str
    details: Any = None


class ProcedenciaDTO(BaseModel):
    empresa: str
    juridico: str
    midia: str
    possui_dados_simulados: bool


class DossieDTO(BaseModel):
    """Contrato unico consumido pela API e pelos dois layouts de documento."""
    cnpj: str
    cnpj_digitos: str
    razao_social: str
    natureza_juridica: str
    capital_social: str
    data_abertura: str | None
    situacao: str
    endereco: EnderecoDTO
    endereco_completo: str
    atividade_principal: str | None
    socios: list[SocioDTO]
    atividades: list[AtividadeDTO]
    financeiro: FinanceiroDTO | None
    parcerias: list[ParceriaDTO]
    aviso_legal: str
    juridico: JuridicoDTO
    midia: MidiaDTO
    risco: RiscoDTO
    procedencia: ProcedenciaDTO
    gerado_em: str

    @classmethod
    def from_domain(cls, dossie: Dossie) -> DossieDTO:
        empresa = dossie.empresa
        fin = empresa.financeiro
        principal = empresa.atividade_principal
        return cls(
            cnpj=empresa.cnpj.formatado,
            cnpj_digitos=empresa.cnpj.valor,
            razao_social=empresa.razao_social,
            natureza_juridica=empresa.natureza_juridica,
            capital_social=str(empresa.capital_social.valor),
            data_abertura=empresa.data_abertura.isoformat() if empresa.data_abertura else None,
            situacao=empresa.situacao,
            endereco=EnderecoDTO(
                logradouro=empresa.endereco.logradouro,
                numero=empresa.endereco.numero,
                complemento=empresa.endereco.complemento,
                bairro=empresa.endereco.bairro,
                municipio=empresa.endereco.municipio,
                uf=empresa.endereco.uf,
                cep=empresa.endereco.cep,
            ),
            endereco_completo=empresa.endereco.linha_unica(),
            atividade_principal=f"{principal.codigo} - {principal.descricao}" if principal else None,
            socios=[
                SocioDTO(nome=s.nome, documento=s.documento, qualificacao=s.qualificacao)
                for s in empresa.socios
            ],
            atividades=[
                AtividadeDTO(codigo=a.codigo, descricao=a.descricao, principal=a.principal)
                for a in empresa.atividades
            ],
            financeiro=FinanceiroDTO(
                receita=str(fin.receita),
                lucro=str(fin.lucro),
                funcionarios=fin.funcionarios,
                atualizado_em=fin.atualizado_em.isoformat(),
            )
            if fin
            else None,
            parcerias=[
                ParceriaDTO(
                    empresa=p.empresa,
                    tipo=p.tipo,
                    data=p.data.isoformat() if p.data else None,
                    descricao=p.descricao,
                )
                for p in empresa.parcerias
            ],
            aviso_legal=dossie.aviso_legal,
            juridico=JuridicoDTO.from_domain(dossie.juridico),
            midia=MidiaDTO.from_domain(dossie.midia),
            risco=RiscoDTO.from_domain(dossie.risco),
            procedencia=ProcedenciaDTO(
                empresa=dossie.procedencia.empresa.value,
                juridico=dossie.procedencia.juridico.value,
                midia=dossie.procedencia.midia.value,
                possui_dados_simulados=dossie.procedencia.possui_dados_simulados,
            ),
            gerado_em=dossie.gerado_em.isoformat(),
        )
