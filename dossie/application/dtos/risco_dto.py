# dossie/application/dtos/risco_dto.py
from __future__ import annotations

from pydantic import BaseModel

from dossie.domain.risco.score import ESCALA_MAXIMA, AnaliseDeRisco


class PenalidadeDTO(BaseModel):
    tipo: str
    pontos: int
    descricao: str


class AlertaDTO(BaseModel):
    severidade: str
    mensagem: str
    detalhe: str | None = None


class RecomendacaoDTO(BaseModel):
    prioridade: str
    mensagem: str
    acao: str | None = None


class RiscoDTO(BaseModel):
    score: int
    escala_maxima: int = ESCALA_MAXIMA
    faixa: str
    penalidades: list[PenalidadeDTO]
    alertas: list[AlertaDTO]
    recomendacoes: list[RecomendacaoDTO]

    @classmethod
    def from_domain(cls, risco: AnaliseDeRisco) -> RiscoDTO:
        return cls(
            score=risco.valor,
            faixa=risco.faixa.value,
            penalidades=[
                PenalidadeDTO(tipo=p.tipo.value, pontos=p.pontos, descricao=p.descricao)
                for p in risco.penalidades
            ],
            alertas=[
                AlertaDTO(severidade=a.severidade.value, mensagem=a.mensagem, detalhe=a.detalhe)
                for a in risco.alertas
            ],
            recomendacoes=[
                RecomendacaoDTO(prioridade=r.prioridade.value, mensagem=r.mensagem, acao=r.acao)
                for r in risco.recomendacoes
            ],
        )
