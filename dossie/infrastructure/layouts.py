# dossie/infrastructure/layouts.py
#
# HTML dos tres formatos de apresentacao do dossie.
#
# Design decisions:
#   - Todos os layouts consomem o MESMO DossieDTO; nenhum recalcula score.
#   - Todo valor vindo de provedor passa por html.escape (_e).
#   - Score sempre exibido como "NN/100".
#   - CSS inline no <style>: o mesmo HTML serve para tela e para weasyprint.
from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from dossie.domain.moeda import formatar_moeda

from .formatacao import formatar_data, formatar_data_extenso, formatar_inteiro

if TYPE_CHECKING:
    from dossie.application.dtos.dossie_dto import DossieDTO

CORES_NIVEL = {"high": "#dc2626", "medium": "#d97706", "low": "#2563eb"}
ROTULOS_NIVEL = {"high": "Alta", "medium": "Média", "low": "Baixa"}
CORES_FAIXA = {"Baixo": "#16a34a", "Moderado": "#d97706", "Alto": "#dc2626"}
ROTULOS_SENTIMENTO = {"positive": "Positivo", "negative": "Negativo", "neutral": "Neutro"}
ROTULOS_PROCEDENCIA = {
    "provedor": "Fonte externa",
    "sintetico": "Dados simulados",
    "indisponivel": "Indisponível",
}

_CSS = """
    body { font-family: Arial, sans-serif; margin: 40px; font-size: 11px; color: #333; }
    h1 { font-size: 18px; border-bottom: 2px solid #333; padding-bottom: 8px; }
    h2 { font-size: 14px; margin-top: 24px; color: #555; }
    table { width: 100%; border-collapse: collapse; margin-top: 8px; }
    th, td { border: 1px solid #ddd; padding: 6px 8px; text-align: left; }
    th { background-color: #f5f5f5; font-weight: bold; }
    .label { font-weight: bold; width: 180px; background-color: #f9f9f9; }
    .disclaimer { font-size: 10px; color: #888; font-style: italic; margin-top: 16px; }
    .score { font-size: 28px; font-weight: bold; }
    .tag { display: inline-block; padding: 2px 6px; border-radius: 3px; color: #fff; font-size: 10px; }
    .simulado { background-color: #fef3c7; border: 1px solid #d97706; padding: 6px 8px; }
"""


def _e(valor: object) -> str:
    return escape(str(valor)) if valor is not None else "-"


def _tag(nivel: str) -> str:
    cor = CORES_NIVEL.get(nivel, "#6b7280")
    return f'<span class="tag" style="background-color: {cor}">{_e(ROTULOS_NIVEL.get(nivel, nivel))}</span>'


def _score(dossie: DossieDTO) -> str:
    risco = dossie.risco
    cor = CORES_FAIXA.get(risco.faixa, "#333")
    return (
        f'<p><span class="score" style="color: {cor}">{risco.score}/{risco.escala_maxima}</span> '
        f'<strong style="color: {cor}">Risco {_e(risco.faixa)}</strong></p>'
    )


def _documento(titulo: str, corpo: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>{_e(titulo)}</title>
<style>{_CSS}</style>
</head>
<body>
{corpo}
</body>
</html>"""


def _aviso_simulado(dossie: DossieDTO) -> str:
    if not dossie.procedencia.possui_dados_simulados:
        return ""
    return '<p class="simulado">Este dossiê contém dados simulados para fins de demonstração.</p>'


def _tabela(cabecalho: list[str], linhas: list[list[str]]) -> str:
    ths = "".join(f"<th>{c}</th>" for c in cabecalho)
    trs = "".join("<tr>" + "".join(f"<td>{c}</td>" for c in linha) + "</tr>" for linha in linhas)
    return f"<table><tr>{ths}</tr>{trs}</table>"


def _alertas(dossie: DossieDTO) -> str:
    if not dossie.risco.alertas:
        return "<h2>Alertas</h2><p>Nenhum alerta identificado.</p>"
    linhas = [[_tag(a.severidade), _e(a.mensagem), _e(a.detalhe)] for a in dossie.risco.alertas]
    return "<h2>Alertas</h2>" + _tabela(["Severidade", "Alerta", "Detalhe"], linhas)


def _recomendacoes(dossie: DossieDTO) -> str:
    if not dossie.risco.recomendacoes:
        return ""
    linhas = [[_tag(r.prioridade), _e(r.mensagem), _e(r.acao)] for r in dossie.risco.recomendacoes]
    return "<h2>Recomendações</h2>" + _tabela(["Prioridade", "Recomendação", "Ação"], linhas)


def _cadastro(dossie: DossieDTO) -> str:
    linhas = [
        ("CNPJ", _e(dossie.cnpj)),
        ("Razão Social", _e(dossie.razao_social)),
        ("Natureza Jurídica", _e(dossie.natureza_juridica)),
        ("Situação", _e(dossie.situacao)),
        ("Data de Abertura", formatar_data(dossie.data_abertura)),
        ("Capital Social", formatar_moeda(dossie.capital_social)),
        ("Endereço", _e(dossie.endereco_completo)),
        ("Atividade Principal", _e(dossie.atividade_principal)),
        ("Procedência", _e(ROTULOS_PROCEDENCIA.get(dossie.procedencia.empresa, dossie.procedencia.empresa))),
    ]
    trs = "".join(f'<tr><td class="label">{rotulo}</td><td>{valor}</td></tr>' for rotulo, valor in linhas)
    return f"<h2>Dados Cadastrais</h2><table>{trs}</table>"


def _financeiro(dossie: DossieDTO) -> str:
    fin = dossie.financeiro
    if fin is None:
        return "<h2>Dados Financeiros</h2><p>Dados financeiros não disponíveis.</p>"
    return "<h2>Dados Financeiros</h2>" + _tabela(
        ["Receita", "Lucro", "Funcionários", "Atualizado em"],
        [[formatar_moeda(fin.receita), formatar_moeda(fin.lucro), formatar_inteiro(fin.funcionarios), formatar_data(fin.atualizado_em)]],
    )


def _socios(dossie: DossieDTO) -> str:
    if not dossie.socios:
        return ""
    linhas = [[_e(s.nome), _e(s.documento), _e(s.qualificacao)] for s in dossie.socios]
    return "<h2>Quadro Societário</h2>" + _tabela(["Nome", "Documento", "Qualificação"], linhas)


def _atividades(dossie: DossieDTO) -> str:
    if not dossie.atividades:
        return ""
    linhas = [
        [_e(a.codigo), _e(a.descricao), "Principal" if a.principal else "Secundária"]
        for a in dossie.atividades
    ]
    return "<h2>Atividades Econômicas</h2>" + _tabela(["CNAE", "Descrição", "Tipo"], linhas)


def _parcerias(dossie: DossieDTO) -> str:
    if not dossie.parcerias:
        return ""
    linhas = [[_e(p.empresa), _e(p.tipo), formatar_data(p.data), _e(p.descricao)] for p in dossie.parcerias]
    return "<h2>Parcerias</h2>" + _tabela(["Empresa", "Tipo", "Data", "Descrição"], linhas)


def _juridico(dossie: DossieDTO) -> str:
    jur = dossie.juridico
    partes = ["<h2>Situação Jurídica</h2>"]
    if jur.falencia:
        partes.append(
            f'<p style="color: {CORES_NIVEL["high"]}"><strong>Falência:</strong> '
            f"{_e(jur.falencia.status)} ({_e(jur.falencia.tribunal)}, {formatar_data(jur.falencia.data)})</p>"
        )
    if jur.processos:
        linhas = [
            [_e(p.numero), _e(p.tribunal), _e(p.tipo), _e(p.status), formatar_data(p.data), formatar_moeda(p.valor)]
            for p in jur.processos
        ]
        partes.append(_tabela(["Número", "Tribunal", "Tipo", "Status", "Data", "Valor"], linhas))
    else:
        partes.append("<p>Nenhum processo judicial encontrado.</p>")
    if jur.mandados:
        linhas = [[_e(m.numero), _e(m.tribunal), _e(m.tipo), _e(m.status), formatar_data(m.data)] for m in jur.mandados]
        partes.append("<h3>Mandados</h3>" + _tabela(["Número", "Tribunal", "Tipo", "Status", "Data"], linhas))
    return "".join(partes)


def _midia(dossie: DossieDTO) -> str:
    midia = dossie.midia
    partes = ["<h2>Mídia e Reputação</h2>"]
    if midia.noticias:
        linhas = [
            [_e(n.titulo), _e(n.fonte), formatar_data(n.data), _e(ROTULOS_SENTIMENTO.get(n.sentimento, n.sentimento))]
            for n in midia.noticias
        ]
        partes.append(_tabela(["Notícia", "Fonte", "Data", "Sentimento"], linhas))
    else:
        partes.append("<p>Nenhuma notícia encontrada.</p>")
    if midia.redes_sociais:
        linhas = [
            [_e(r.plataforma), formatar_inteiro(r.mencoes), _e(ROTULOS_SENTIMENTO.get(r.sentimento, r.sentimento)), formatar_data(r.ultima_mencao)]
            for r in midia.redes_sociais
        ]
        partes.append(
            f"<h3>Redes Sociais ({formatar_inteiro(midia.total_mencoes)} menções)</h3>"
            + _tabela(["Plataforma", "Menções", "Sentimento", "Última menção"], linhas)
        )
    if midia.reclamacoes:
        linhas = [
            [_e(r.fonte), formatar_inteiro(r.quantidade), f"{r.percentual_resolucao}%", _e(r.status), _e(r.detalhes.tempo_medio_resposta)]
            for r in midia.reclamacoes
        ]
        partes.append(
            f"<h3>Reclamações ({formatar_inteiro(midia.total_reclamacoes)})</h3>"
            + _tabela(["Fonte", "Quantidade", "Resolução", "Status", "Tempo médio"], linhas)
        )
    return "".join(partes)


def _penalidades(dossie: DossieDTO) -> str:
    if not dossie.risco.penalidades:
        return ""
    linhas = [[_e(p.descricao), f"-{p.pontos}"] for p in dossie.risco.penalidades]
    return _tabela(["Fator", "Pontos"], linhas)


def _rodape(dossie: DossieDTO) -> str:
    return (
        f'<p class="disclaimer">Gerado em {formatar_data_extenso(dossie.gerado_em)}.</p>'
        f'<p class="disclaimer">{_e(dossie.aviso_legal)}</p>'
    )


def renderizar_resumo(dossie: DossieDTO) -> str:
    """Resumo em tela: identificacao, score, alertas e recomendacoes."""
    corpo = "".join([
        f"<h1>{_e(dossie.razao_social)}</h1>",
        f"<p>CNPJ {_e(dossie.cnpj)} | {_e(dossie.situacao)}</p>",
        _aviso_simulado(dossie),
        _score(dossie),
        _alertas(dossie),
        _recomendacoes(dossie),
        _rodape(dossie),
    ])
    return _documento(f"Resumo - {dossie.cnpj}", corpo)


def renderizar_completo(dossie: DossieDTO) -> str:
    corpo = "".join([
        "<h1>Dossiê Empresarial</h1>",
        _aviso_simulado(dossie),
        _cadastro(dossie),
        _atividades(dossie),
        _socios(dossie),
        _financeiro(dossie),
        _parcerias(dossie),
        "<h2>Análise de Risco</h2>",
        _score(dossie),
        _penalidades(dossie),
        _alertas(dossie),
        _recomendacoes(dossie),
        _juridico(dossie),
        _midia(dossie),
        _rodape(dossie),
    ])
    return _documento(f"Dossiê - {dossie.cnpj}", corpo)


def renderizar_minimo(dossie: DossieDTO) -> str:
    """Uma pagina: cadastro essencial, score e contagens."""
    linhas = [
        ("CNPJ", _e(dossie.cnpj)),
        ("Razão Social", _e(dossie.razao_social)),
        ("Situação", _e(dossie.situacao)),
        ("Capital Social", formatar_moeda(dossie.capital_social)),
        ("Score", f"{dossie.risco.score}/{dossie.risco.escala_maxima} ({_e(dossie.risco.faixa)})"),
        ("Processos", str(len(dossie.juridico.processos))),
        ("Notícias", str(len(dossie.midia.noticias))),
        ("Reclamações", formatar_inteiro(dossie.midia.total_reclamacoes)),
    ]
    trs = "".join(f'<tr><td class="label">{rotulo}</td><td>{valor}</td></tr>' for rotulo, valor in linhas)
    corpo = "".join([
        "<h1>Dossiê Resumido</h1>",
        _aviso_simulado(dossie),
        f"<table>{trs}</table>",
        _alertas(dossie),
        _rodape(dossie),
    ])
    return _documento(f"Dossiê resumido - {dossie.cnpj}", corpo)


LAYOUTS_DOCUMENTO = {
    "completo": renderizar_completo,
    "minimo": renderizar_minimo,
}
