# dossie/infrastructure/provedores/receita_client.py
from __future__ import annotations

from typing import Any

from dossie.domain.empresa.entities import Atividade, Empresa, Socio
from dossie.domain.empresa.value_objects import CNPJ, CapitalSocial, Endereco
from dossie.domain.exceptions import ProvedorIndisponivel

from .base import ERROS_DE_FORMATO, ClienteProvedor, parse_data, parse_decimal, parse_texto


class ReceitaClient(ClienteProvedor):
    """Cadastro da Receita Federal (formato publica.cnpj.ws)."""

    nome = "receita"

    def buscar_empresa(self, cnpj: CNPJ) -> Empresa:
        payload = self._get_json(f"/cnpj/{cnpj.valor}")
        try:
            return _empresa_from_payload(cnpj, payload)
        except ERROS_DE_FORMATO as err:
            raise ProvedorIndisponivel(self.nome, f"resposta fora do formato: {err!r}") from err


def _empresa_from_payload(cnpj: CNPJ, data: dict[str, Any]) -> Empresa:
    if not data:
        raise ValueError("resposta vazia")

    est: dict[str, Any] = data.get("estabelecimento") or {}
    natureza = parse_texto((data.get("natureza_juridica") or {}).get("descricao"), "Sociedade Empresária Limitada")
    logradouro = " ".join([
        parse_texto(est.get("tipo_logradouro")),
        parse_texto(est.get("logradouro"), "Endereço não disponível"),
    ]).strip()

    return Empresa(
        cnpj=cnpj,
        razao_social=parse_texto(data.get("razao_social"), f"Empresa {cnpj.formatado}"),
        natureza_juridica=natureza,
        capital_social=CapitalSocial(parse_decimal(data.get("capital_social"))),
        situacao=parse_texto(est.get("situacao_cadastral"), "Ativa"),
        data_abertura=parse_data(est.get("data_inicio_atividade")),
        endereco=Endereco(
            logradouro=logradouro,
            numero=parse_texto(est.get("numero"), "S/N"),
            complemento=parse_texto(est.get("complemento")),
            bairro=parse_texto(est.get("bairro"), "Bairro não disponível"),
            municipio=parse_texto((est.get("cidade") or {}).get("nome"), "Cidade não disponível"),
            uf=parse_texto((est.get("estado") or {}).get("sigla")),
            cep=parse_texto(est.get("cep")),
        ),
        socios=tuple(
            Socio(
                nome=parse_texto(s["nome"]),
                documento=parse_texto(s.get("cpf_cnpj_socio")),
                qualificacao=parse_texto((s.get("qualificacao_socio") or {}).get("descricao") or s.get("tipo")),
            )
            for s in data.get("socios") or []
        ),
        atividades=_atividades(est),
    )


def _atividade(raw: dict[str, Any], principal: bool) -> Atividade:
    return Atividade(
        codigo=parse_texto(raw.get("id"), "00000"),
        descricao=parse_texto(raw.get("descricao"), "Atividade não especificada"),
        principal=principal,
    )


def _atividades(est: dict[str, Any]) -> tuple[Atividade, ...]:
    atividades = [_atividade(est.get("atividade_principal") or {}, principal=True)]
    atividades.extend(_atividade(ativ, principal=False) for ativ in est.get("atividades_secundarias") or [])
    return tuple(atividades)
