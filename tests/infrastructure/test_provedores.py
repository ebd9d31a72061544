# tests/infrastructure/test_provedores.py
import json
from datetime import date, datetime
from decimal import Decimal

import httpx
import pytest

from dossie.application.services.agregacao_service import AgregadorService
from dossie.application.services.dossie_service import DossieService
from dossie.domain.empresa.value_objects import CNPJ
from dossie.domain.exceptions import ProvedorIndisponivel
from dossie.domain.midia.enums import Sentimento
from dossie.infrastructure.provedores.jusbrasil_client import JusBrasilClient
from dossie.infrastructure.provedores.noticias_client import NoticiasClient
from dossie.infrastructure.provedores.receita_client import ReceitaClient

CNPJ_TESTE = CNPJ("11222333000181")

PAYLOAD_RECEITA = {
    "razao_social": "EMPRESA TESTE LTDA",
    "capital_social": "150000.00",
    "natureza_juridica": {"descricao": "Sociedade Empresária Limitada"},
    "socios": [
        {"nome": "JOAO DA SILVA", "cpf_cnpj_socio": "***456789**", "qualificacao_socio": {"descricao": "Sócio-Administrador"}},
    ],
    "estabelecimento": {
        "situacao_cadastral": "Ativa",
        "data_inicio_atividade": "2015-03-10",
        "tipo_logradouro": "RUA",
        "logradouro": "DAS FLORES",
        "numero": "100",
        "complemento": None,
        "bairro": "CENTRO",
        "cidade": {"nome": "São Paulo"},
        "estado": {"sigla": "SP"},
        "cep": "01001000",
        "atividade_principal": {"id": "6201501", "descricao": "Desenvolvimento de programas"},
        "atividades_secundarias": [{"id": "6204000", "descricao": "Consultoria em TI"}],
    },
}


def _http(handler, base_url: str = "https://provedor.test") -> httpx.Client:
    return httpx.Client(base_url=base_url, transport=httpx.MockTransport(handler))


def _json(payload, status: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=payload)
    return handler


# ---------- ReceitaClient ----------


def test_receita_mapeia_payload_para_empresa():
    recebidas: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        recebidas.append(request)
        return httpx.Response(200, json=PAYLOAD_RECEITA)

    client = ReceitaClient("chave", "https://provedor.test", http=_http(handler))
    empresa = client.buscar_empresa(CNPJ_TESTE)

    assert recebidas[0].url.path == "/cnpj/11222333000181"
    assert recebidas[0].headers["Authorization"] == "Bearer chave"
    assert empresa.razao_social == "EMPRESA TESTE LTDA"
    assert empresa.capital_social.valor == Decimal("150000.00")
    assert empresa.data_abertura == date(2015, 3, 10)
    assert empresa.endereco.logradouro == "RUA DAS FLORES"
    assert empresa.endereco.municipio == "São Paulo"
    assert empresa.socios[0].qualificacao == "Sócio-Administrador"
    assert [a.principal for a in empresa.atividades] == [True, False]
    assert empresa.financeiro is None
    assert empresa.ativa


def test_receita_campos_ausentes_recebem_placeholders():
    client = ReceitaClient("chave", "https://provedor.test", http=_http(_json({"razao_social": "X"})))
    empresa = client.buscar_empresa(CNPJ_TESTE)
    assert empresa.endereco.numero == "S/N"
    assert empresa.endereco.logradouro == "Endereço não disponível"
    assert empresa.capital_social.valor == Decimal("0")
    assert empresa.socios == ()
    assert empresa.atividades[0].descricao == "Atividade não especificada"


def test_sem_credencial_falha_sem_chamar_rede():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("nao deveria chamar a rede")

    client = ReceitaClient("", "https://provedor.test", http=_http(handler))
    with pytest.raises(ProvedorIndisponivel, match="credencial"):
        client.buscar_empresa(CNPJ_TESTE)


def test_status_de_erro_vira_provedor_indisponivel():
    client = ReceitaClient("chave", "https://provedor.test", http=_http(_json({}, status=503)))
    with pytest.raises(ProvedorIndisponivel) as exc:
        client.buscar_empresa(CNPJ_TESTE)
    assert exc.value.provedor == "receita"
    assert exc.value.motivo == "HTTP 503"


def test_erro_de_rede_vira_provedor_indisponivel():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timeout", request=request)

    client = ReceitaClient("chave", "https://provedor.test", http=_http(handler))
    with pytest.raises(ProvedorIndisponivel, match="falha de rede"):
        client.buscar_empresa(CNPJ_TESTE)


def test_resposta_nao_json_vira_provedor_indisponivel():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>manutencao</html>")

    client = ReceitaClient("chave", "https://provedor.test", http=_http(handler))
    with pytest.raises(ProvedorIndisponivel, match="JSON"):
        client.buscar_empresa(CNPJ_TESTE)


# ---------- JusBrasilClient ----------


def test_jusbrasil_mapeia_processos_mandados_e_falencia():
    payload = {
        "processos": [
            {"numero": "0001", "tribunal": "TJSP", "tipo": "Civil", "status": "Em andamento",
             "data": "2025-02-01", "valor": "12000.50", "partes": ["Autor", "Empresa"]},
        ],
        "mandados": [{"numero": "M1", "tribunal": "TRT2", "tipo": "Penhora", "status": "Cumprido", "data": "2025-03-01"}],
        "falencia": {"status": "Requerida", "data": "2025-04-01", "tribunal": "TJSP"},
    }
    client = JusBrasilClient("chave", "https://provedor.test", http=_http(_json(payload)))
    dados = client.buscar_dados_juridicos(CNPJ_TESTE)
    assert dados.processos[0].valor == Decimal("12000.50")
    assert dados.processos[0].partes == ("Autor", "Empresa")
    assert dados.mandados[0].numero == "M1"
    assert dados.falencia is not None
    assert dados.falencia.data == date(2025, 4, 1)


def test_jusbrasil_sem_registros():
    client = JusBrasilClient("chave", "https://provedor.test", http=_http(_json({"processos": [], "falencia": None})))
    dados = client.buscar_dados_juridicos(CNPJ_TESTE)
    assert dados.processos == ()
    assert dados.falencia is None


def test_jusbrasil_payload_fora_do_formato():
    client = JusBrasilClient("chave", "https://provedor.test", http=_http(_json({"processos": [{"tribunal": "TJSP"}]})))
    with pytest.raises(ProvedorIndisponivel, match="formato"):
        client.buscar_dados_juridicos(CNPJ_TESTE)


# ---------- NoticiasClient ----------


def test_noticias_busca_por_razao_social_e_classifica_sentimento():
    recebidas: list[httpx.Request] = []
    payload = {
        "articles": [
            {"title": "Empresa Teste recebe multa", "source": {"name": "G1"},
             "publishedAt": "2026-10-01T10:00:00Z", "url": "https://g1.test/1", "description": ""},
            {"title": "Empresa Teste bate recorde de lucro", "source": {"name": "Valor"},
             "publishedAt": "2026-10-02T10:00:00Z", "url": "https://valor.test/2", "description": None},
        ]
    }

    def handler(request: httpx.Request) -> httpx.Response:
        recebidas.append(request)
        return httpx.Response(200, content=json.dumps(payload))

    client = NoticiasClient("chave", "https://provedor.test", http=_http(handler))
    midia = client.buscar_dados_midia(CNPJ_TESTE, "Empresa Teste")

    assert recebidas[0].url.path == "/v2/everything"
    assert recebidas[0].url.params["q"] == "Empresa Teste"
    assert recebidas[0].url.params["language"] == "pt"
    assert recebidas[0].headers["X-Api-Key"] == "chave"
    assert [n.sentimento for n in midia.noticias] == [Sentimento.NEGATIVO, Sentimento.POSITIVO]
    assert midia.noticias[0].data == date(2026, 10, 1)
    assert midia.redes_sociais == ()
    assert midia.reclamacoes == ()


# ---------- payloads 2xx malformados ----------


@pytest.mark.parametrize("capital", ["NaN", "Infinity", "-inf", "abc", {"valor": 1}, True])
def test_receita_capital_social_nao_numerico_vira_provedor_indisponivel(capital):
    payload = {"razao_social": "X", "capital_social": capital}
    client = ReceitaClient("chave", "https://provedor.test", http=_http(_json(payload)))
    with pytest.raises(ProvedorIndisponivel, match="formato"):
        client.buscar_empresa(CNPJ_TESTE)


def test_receita_campos_numericos_viram_texto():
    payload = {
        "razao_social": "X",
        "socios": [{"nome": "Ana", "cpf_cnpj_socio": 12345678900}],
        "estabelecimento": {"numero": 100, "cep": 1001000, "atividade_principal": {"id": 6201501}},
    }
    client = ReceitaClient("chave", "https://provedor.test", http=_http(_json(payload)))
    empresa = client.buscar_empresa(CNPJ_TESTE)
    assert empresa.endereco.numero == "100"
    assert empresa.endereco.cep == "1001000"
    assert empresa.socios[0].documento == "12345678900"
    assert empresa.atividades[0].codigo == "6201501"


@pytest.mark.parametrize(
    "estabelecimento",
    [{"numero": {"n": 1}}, {"bairro": ["Centro"]}, {"cidade": "São Paulo"}, "texto"],
)
def test_receita_campo_com_tipo_errado_vira_provedor_indisponivel(estabelecimento):
    payload = {"razao_social": "X", "estabelecimento": estabelecimento}
    client = ReceitaClient("chave", "https://provedor.test", http=_http(_json(payload)))
    with pytest.raises(ProvedorIndisponivel, match="formato"):
        client.buscar_empresa(CNPJ_TESTE)



def test_receita_payload_malformado_cai_no_fallback_do_dossie():
    """Resposta 2xx com tipos errados nao derruba a requisicao: empresa sintetica."""

    class Offline:
        def buscar_dados_juridicos(self, cnpj):
            raise ProvedorIndisponivel("juridico", "offline")

        def buscar_dados_midia(self, cnpj, razao_social):
            raise ProvedorIndisponivel("midia", "offline")

    receita = ReceitaClient(
        "chave",
        "https://provedor.test",
        http=_http(_json({"razao_social": "X", "capital_social": "NaN", "estabelecimento": {"numero": {"n": 1}}})),
    )
    offline = Offline()
    service = DossieService(AgregadorService(receita, offline, offline), relogio=lambda: datetime(2026, 10, 19))
    dto = service.obter_dossie("11222333000181")
    assert dto.procedencia.empresa == "sintetico"
    assert dto.razao_social == "Empresa 11.222.333/0001-81"


def test_jusbrasil_valor_nan_e_partes_numericas():
    base = {"numero": 123, "tribunal": "TJSP", "data": "2025-02-01", "partes": [1, "Empresa"]}
    client = JusBrasilClient("chave", "https://provedor.test", http=_http(_json({"processos": [base]})))
    dados = client.buscar_dados_juridicos(CNPJ_TESTE)
    assert dados.processos[0].numero == "123"
    assert dados.processos[0].partes == ("1", "Empresa")

    nan = {**base, "valor": "NaN"}
    client = JusBrasilClient("chave", "https://provedor.test", http=_http(_json({"processos": [nan]})))
    with pytest.raises(ProvedorIndisponivel, match="formato"):
        client.buscar_dados_juridicos(CNPJ_TESTE)


@pytest.mark.parametrize(
    "artigo",
    [
        {"title": {"t": 1}, "publishedAt": "2026-10-01"},
        {"title": "", "publishedAt": "2026-10-01"},
        {"title": "ok", "publishedAt": "ontem"},
        {"title": "ok", "publishedAt": "2026-10-01", "url": ["a"]},
    ],
)
def test_noticias_artigo_malformado_vira_provedor_indisponivel(artigo):
    client = NoticiasClient("chave", "https://provedor.test", http=_http(_json({"articles": [artigo]})))
    with pytest.raises(ProvedorIndisponivel, match="formato"):
        client.buscar_dados_midia(CNPJ_TESTE, "X")
