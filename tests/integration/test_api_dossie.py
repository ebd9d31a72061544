# tests/integration/test_api_dossie.py
from fastapi.testclient import TestClient


def test_vitrine_retorna_dossie_completo(client: TestClient) -> None:
    response = client.post("/api/cnpj", json={"cnpj": "07526557000100"})
    assert response.status_code == 200
    data = response.json()
    assert data["cnpj"] == "07.526.557/0001-00"
    assert data["razao_social"] == "Ambev S.A."
    assert data["risco"]["score"] == 57
    assert data["risco"]["escala_maxima"] == 100
    assert data["risco"]["faixa"] == "Moderado"
    assert data["risco"]["alertas"] == []
    assert [r["prioridade"] for r in data["risco"]["recomendacoes"]] == ["high", "low", "medium"]
    assert data["procedencia"] == {
        "empresa": "sintetico",
        "juridico": "sintetico",
        "midia": "sintetico",
        "possui_dados_simulados": True,
    }
    assert data["aviso_legal"]


def test_vitrine_aceita_cnpj_formatado(client: TestClient) -> None:
    a = client.post("/api/cnpj", json={"cnpj": "07.526.557/0001-00"}).json()
    b = client.post("/api/cnpj", json={"cnpj": "07526557000100"}).json()
    a.pop("gerado_em")
    b.pop("gerado_em")
    assert a == b


def test_cnpj_desconhecido_sem_provedores(client: TestClient) -> None:
    response = client.post("/api/cnpj", json={"cnpj": "11222333000181"})
    assert response.status_code == 200
    data = response.json()
    assert data["razao_social"] == "Empresa 11.222.333/0001-81"
    assert data["juridico"]["processos"] == []
    assert data["midia"]["noticias"] == []
    assert data["risco"]["score"] == 70
    assert data["risco"]["faixa"] == "Baixo"
    assert data["procedencia"]["juridico"] == "indisponivel"
    assert data["procedencia"]["midia"] == "indisponivel"


def test_cnpj_conhecido_fora_da_vitrine_usa_nome_conhecido(client: TestClient) -> None:
    data = client.post("/api/cnpj", json={"cnpj": "33000167000101"}).json()
    assert data["razao_social"] == "Petróleo Brasileiro S.A. - Petrobras"


def test_resumo_retorna_html(client: TestClient) -> None:
    response = client.post("/api/cnpj/resumo", json={"cnpj": "07526557000100"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "57/100" in response.text


def test_security_headers(client: TestClient) -> None:
    response = client.post("/api/cnpj", json={"cnpj": "07526557000100"})
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"
