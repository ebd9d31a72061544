# dossie/application/dtos/midia_dto.py
from __future__ import annotations

from pydantic import BaseModel

from dossie.domain.midia.entities import DadosMidia


class NoticiaDTO(BaseModel):
    titulo: str
    fonte: str
    data: str
    url: str
    sentimento: str
    resumo: str


class RedeSocialDTO(BaseModel):
    plataforma: str
    mencoes: int
    sentimento: str
    ultima_mencao: str


class DetalheReclamacoesDTO(BaseModel):
    resolvidas: int
    pendentes: int
    nao_resolvidas: int
    tempo_medio_resposta: str


class ReclamacoesDTO(BaseModel):
    fonte: str
    quantidade: int
    ultima_reclamacao: str
    url: str
    status: str
    percentual_resolucao: int
    detalhes: DetalheReclamacoesDTO


class MidiaDTO(BaseModel):
    noticias: list[NoticiaDTO]
    redes_sociais: list[RedeSocialDTO]
    reclamacoes: list[ReclamacoesDTO]

    @property
    def total_mencoes(self) -> int:
        return sum(r.mencoes for r in self.redes_sociais)

    @property
    def total_reclamacoes(self) -> int:
        return sum(r.quantidade for r in self.reclamacoes)

    @classmethod
    def from_domain(cls, midia: DadosMidia) -> MidiaDTO:
        return cls(
            noticias=[
                NoticiaDTO(
                    titulo=n.titulo,
                    fonte=n.fonte,
                    data=n.data.isoformat(),
                    url=n.url,
                    sentimento=n.sentimento.value,
                    resumo=n.resumo,
                )
                for n in midia.noticias
            ],
            redes_sociais=[
                RedeSocialDTO(
                    plataforma=r.plataforma,
                    mencoes=r.mencoes,
                    sentimento=r.sentimento.value,
                    ultima_mencao=r.ultima_mencao.isoformat(),
                )
                for r in midia.redes_sociais
            ],
            reclamacoes=[
                ReclamacoesDTO(
                    fonte=r.fonte,
                    quantidade=r.quantidade,
                    ultima_reclamacao=r.ultima_reclamacao.isoformat(),
                    url=r.url,
                    status=r.status,
                    percentual_resolucao=r.percentual_resolucao,
                    detalhes=DetalheReclamacoesDTO(
                        resolvidas=r.detalhes.resolvidas,
                        pendentes=r.detalhes.pendentes,
                        nao_resolvidas=r.detalhes.nao_resolvidas,
                        tempo_medio_resposta=r.detalhes.tempo_medio_resposta,
                    ),
                )
                for r in midia.reclamacoes
            ],
        )
