# tests/infrastructure/test_layouts.py
import random
from datetime import date, datetime

import pytest

from dossie.application.dtos.dossie_dto import DossieDTO
from dossie.application.services.agregacao_service import AgregadorService
from dossie.application.services.dados_sinteticos import CNPJ_VITRINE, GeradorSintetico
from dossie.application.services.dossie_service import DossieService
from dossie.domain.exceptions import ProvedorIndisponivel
from dossie.infrastructure.layouts import renderizar_completo, renderizar_minimo, renderizar_resumo
from dossie.infrastructure.pdf_generator import gerar_pdf_dossie


class ProvedorOffline:
    def buscar_empresa(self, cnpj):
        raise ProvedorIndisponivel("cadastro", "offline")

    def buscar_dados_juridicos(self, cnpj):
        raise ProvedorIndisponivel("juridico", "offline")

    def buscar_dados_midia(self, cnpj, razao_social):
        raise ProvedorIndisponivel("midia", "offline")


def _dossie(cnpj: str = CNPJ_VITRINE) -> DossieDTO:
    p = ProvedorOffline()
    gerador = GeradorSintetico(rng=random.Random(1), hoje=lambda: date(2026, 10, 19))
    service = DossieService(AgregadorService(p, p, p, gerador=gerador), relogio=lambda: datetime(2026, 10, 19, 14, 30))
    return service.obter_dossie(cnpj)


def test_resumo_mostra_score_alertas_e_aviso():
    html = renderizar_resumo(_dossie())
    assert "Ambev S.A." in html
    assert "57/100" in html
    assert "Risco Moderado" in html
    assert "Nenhum alerta identificado." in html
    assert "Processos Judiciais Ativos" in html
    assert "19 de outubro de 2026 às 14:30" in html
    assert "dados simulados" in html


def test_completo_contem_todas_as_secoes():
    html = renderizar_completo(_dossie())
    for secao in ("Dados Cadastrais", "Quadro Societário", "Dados Financeiros", "Parcerias",
                  "Análise de Risco", "Situação Jurídica", "Mídia e Reputação"):
        assert secao in html
    assert "R$ 57.899.000.000,00" in html
    assert "07.526.557/0001-00" in html
    assert "Cervejaria Colorado" in html


def test_minimo_usa_mesma_escala():
    html = renderizar_minimo(_dossie())
    assert "57/100 (Moderado)" in html
    assert "Reclamações" in html


def test_secoes_vazias_tem_mensagem():
    html = renderizar_completo(_dossie("11222333000181"))
    assert "Nenhum processo judicial encontrado." in html
    assert "Nenhuma notícia encontrada." in html


def test_valores_do_provedor_sao_escapados():
    dto = _dossie().model_copy(update={"razao_social": "<script>alert(1)</script>"})
    html = renderizar_resumo(dto)
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_cor_da_faixa_de_risco():
    html = renderizar_resumo(_dossie())
    assert '<span class="score" style="color: #d97706">57/100</span>' in html


def test_layout_desconhecido_no_pdf():
    with pytest.raises(KeyError):
        gerar_pdf_dossie(_dossie(), "colorido")
