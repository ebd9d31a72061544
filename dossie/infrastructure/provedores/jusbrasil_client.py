# dossie/infrastructure/provedores/jusbrasil_client.py
from __future__ import annotations

from typing import Any

from dossie.domain.empresa.value_objects import CNPJ
from dossie.domain.exceptions import ProvedorIndisponivel
from dossie.domain.juridico.entities import DadosJuridicos, Falencia, MandadoJudicial, Processo

from .base import ERROS_DE_FORMATO, ClienteProvedor, parse_data_obrigatoria, parse_decimal, parse_texto


class JusBrasilClient(ClienteProvedor):
    nome = "jusbrasil"

    def buscar_dados_juridicos(self, cnpj: CNPJ) -> DadosJuridicos:
        payload = self._get_json(f"/v1/empresa/{cnpj.valor}/processos")
        try:
            return _juridico_from_payload(payload)
        except ERROS_DE_FORMATO as err:
            raise ProvedorIndisponivel(self.nome, f"resposta fora do formato: {err!r}") from err


def _obrigatorio(raw: dict[str, Any], campo: str) -> str:
    valor = parse_texto(raw[campo])
    if not valor:
        raise ValueError(f"campo {campo} vazio")
    return valor


def _juridico_from_payload(data: dict[str, Any]) -> DadosJuridicos:
    falencia_raw = data.get("falencia")
    return DadosJuridicos(
        processos=tuple(
            Processo(
                numero=_obrigatorio(p, "numero"),
                tribunal=_obrigatorio(p, "tribunal"),
                tipo=parse_texto(p.get("tipo")),
                status=parse_texto(p.get("status")),
                data=parse_data_obrigatoria(p.get("data")),
                valor=parse_decimal(p.get("valor")),
                partes=tuple(parse_texto(parte) for parte in p.get("partes") or ()),
            )
            for p in data.get("processos") or []
        ),
        mandados=tuple(
            MandadoJudicial(
                numero=_obrigatorio(m, "numero"),
                tribunal=_obrigatorio(m, "tribunal"),
                tipo=parse_texto(m.get("tipo")),
                status=parse_texto(m.get("status")),
                data=parse_data_obrigatoria(m.get("data")),
            )
            for m in data.get("mandados") or []
        ),
        falencia=Falencia(
            status=_obrigatorio(falencia_raw, "status"),
            data=parse_data_obrigatoria(falencia_raw.get("data")),
            tribunal=parse_texto(falencia_raw.get("tribunal")),
        )
        if falencia_raw
        else None,
    )
