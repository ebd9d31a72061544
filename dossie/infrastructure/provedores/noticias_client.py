# dossie/infrastructure/provedores/noticias_client.py
from __future__ import annotations

from typing import Any

from dossie.application.services.sentimento import classificar_sentimento
from dossie.domain.empresa.value_objects import CNPJ
from dossie.domain.exceptions import ProvedorIndisponivel
from dossie.domain.midia.entities import DadosMidia, Noticia

from .base import ERROS_DE_FORMATO, ClienteProvedor, parse_data_obrigatoria, parse_texto


class NoticiasClient(ClienteProvedor):
    """Busca de noticias (formato NewsAPI). Redes sociais e reclamacoes nao tem
    fonte integrada e voltam vazias."""

    nome = "noticias"

    def _headers(self) -> dict[str, str]:
        return {"X-Api-Key": self._api_key, "Accept": "application/json"}

    def buscar_dados_midia(self, cnpj: CNPJ, razao_social: str) -> DadosMidia:
        payload = self._get_json(
            "/v2/everything",
            params={"q": razao_social, "language": "pt", "sortBy": "publishedAt"},
        )
        try:
            noticias = tuple(_noticia_from_artigo(a) for a in payload.get("articles") or [])
        except ERROS_DE_FORMATO as err:
            raise ProvedorIndisponivel(self.nome, f"resposta fora do formato: {err!r}") from err
        return DadosMidia(noticias=noticias)


def _noticia_from_artigo(artigo: dict[str, Any]) -> Noticia:
    titulo = parse_texto(artigo["title"])
    if not titulo:
        raise ValueError("artigo sem titulo")
    resumo = parse_texto(artigo.get("description"))
    return Noticia(
        titulo=titulo,
        fonte=parse_texto((artigo.get("source") or {}).get("name")),
        data=parse_data_obrigatoria(artigo.get("publishedAt")),
        url=parse_texto(artigo.get("url")),
        sentimento=classificar_sentimento(f"{titulo} {resumo}"),
        resumo=resumo,
    )
