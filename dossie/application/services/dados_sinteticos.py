# dossie/application/services/dados_sinteticos.py
"""Dados substitutos usados quando um provedor falha.

Dois tipos:
  - gerados (pseudo-aleatorios, a partir de modelos fixos);
  - vitrine (fixos, para CNPJs conhecidos usados em demonstracao).

O gerador recebe o Random e o relogio por injecao: em teste, seed fixo.
"""
from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from dossie.domain.empresa.entities import (
    Atividade,
    DadosFinanceiros,
    Empresa,
    Parceria,
    Socio,
)
from dossie.domain.empresa.value_objects import CNPJ, CapitalSocial, Endereco
from dossie.domain.juridico.entities import DadosJuridicos, Processo
from dossie.domain.midia.entities import (
    DadosMidia,
    DetalheReclamacoes,
    MencaoRedeSocial,
    Noticia,
    Reclamacoes,
)
from dossie.domain.midia.enums import Sentimento

# CNPJ da Ambev: 07.526.557/0001-00
CNPJ_VITRINE = "07526557000100"

EMPRESAS_CONHECIDAS: dict[str, str] = {
    "07526557000100": "Ambev S.A.",
    "13347016000117": "Meta Platforms Brasil Ltda.",
    "60746948000112": "Banco Bradesco S.A.",
    "33000167000101": "Petróleo Brasileiro S.A. - Petrobras",
    "33041260065290": "Vale S.A.",
    "60840055000131": "Itaú Unibanco S.A.",
    "59105999000186": "Magazine Luiza S.A.",
    "47508411000156": "Natura Cosméticos S.A.",
    "00000000000191": "Banco do Brasil S.A.",
    "02558157000162": "VIVO - Telefônica Brasil S.A.",
}

_CAPITAIS = (
    Decimal("100000"),
    Decimal("500000"),
    Decimal("1000000"),
    Decimal("5000000"),
    Decimal("10000000"),
)
_INICIO_FUNDACAO = date(2000, 1, 1)
_FIM_FUNDACAO = date(2022, 12, 31)

_SOCIOS_MODELO = (
    Socio(nome="João Silva", documento="123.456.789-00", qualificacao="Sócio Administrador"),
    Socio(nome="Maria Santos", documento="987.654.321-00", qualificacao="Sócio"),
)

_ATIVIDADES_MODELO = (
    Atividade(codigo="6202-3/00", descricao="Desenvolvimento de software", principal=True),
    Atividade(codigo="6311-9/00", descricao="Tratamento de dados e hospedagem", principal=False),
    Atividade(codigo="7020-4/00", descricao="Consultoria empresarial", principal=False),
)

_NOTICIAS_MODELO: dict[Sentimento, tuple[tuple[str, str], ...]] = {
    Sentimento.POSITIVO: (
        ("Empresa anuncia expansão e novos investimentos", "Planos de crescimento incluem abertura de novas unidades"),
        ("Resultados superam expectativas do mercado", "Lucro cresceu 25% em relação ao ano anterior"),
        ("Empresa recebe prêmio de inovação", "Reconhecimento por práticas sustentáveis e inovadoras"),
        ("Nova parceria estratégica anunciada", "Acordo promete impulsionar crescimento nos próximos anos"),
    ),
    Sentimento.NEGATIVO: (
        ("Empresa enfrenta desafios no mercado", "Resultados abaixo das expectativas preocupam investidores"),
        ("Investigação apura irregularidades", "Órgãos reguladores iniciam averiguação de denúncias"),
        ("Queda nas vendas preocupa acionistas", "Empresa anuncia revisão de estratégia comercial"),
    ),
    Sentimento.NEUTRO: (
        ("Empresa anuncia mudanças na diretoria", "Novo CEO assume comando a partir do próximo mês"),
        ("Reestruturação organizacional em andamento", "Mudanças visam otimizar operações e reduzir custos"),
        ("Empresa revisa projeções anuais", "Ajustes consideram novo cenário econômico"),
    ),
}
_FONTES_NOTICIAS = ("Valor Econômico", "G1", "Estadão", "Folha de S.Paulo", "InfoMoney", "Reuters")

# (plataforma, base de mencoes, multiplicador maximo)
_PLATAFORMAS = (
    ("LinkedIn", 5000, 2),
    ("Twitter", 10000, 5),
    ("Instagram", 8000, 3),
    ("Facebook", 15000, 4),
)

# (fonte, base de reclamacoes)
_FONTES_RECLAMACOES = (("Reclame Aqui", 1000), ("Consumidor.gov.br", 500))


def nome_empresa_por_cnpj(cnpj: CNPJ) -> str:
    return EMPRESAS_CONHECIDAS.get(cnpj.valor, f"Empresa {cnpj.formatado}")


def status_reclamacoes(percentual_resolucao: int) -> str:
    if percentual_resolucao >= 80:
        return "BOM"
    if percentual_resolucao >= 70:
        return "REGULAR"
    return "RUIM"


def url_reclamacoes(fonte: str, razao_social: str) -> str:
    if fonte == "Reclame Aqui":
        slug = "-".join(razao_social.lower().split())
        return f"https://www.reclameaqui.com.br/empresa/{slug}"
    return "https://consumidor.gov.br"


class GeradorSintetico:
    """Gera registros plausiveis a partir de modelos fixos. Nao deterministico por padrao."""

    def __init__(
        self,
        rng: random.Random | None = None,
        hoje: Callable[[], date] = date.today,
    ) -> None:
        self._rng = rng or random.Random()
        self._hoje = hoje

    def empresa(self, cnpj: CNPJ) -> Empresa:
        return Empresa(
            cnpj=cnpj,
            razao_social=nome_empresa_por_cnpj(cnpj),
            natureza_juridica="Sociedade Empresária Limitada",
            capital_social=CapitalSocial(self._rng.choice(_CAPITAIS)),
            situacao="Ativa",
            data_abertura=self._data_fundacao(),
            endereco=Endereco(
                logradouro="Avenida Paulista",
                numero=str(self._rng.randint(1, 2000)),
                complemento="",
                bairro="Bela Vista",
                municipio="São Paulo",
                uf="SP",
                cep="01310-100",
            ),
            socios=_SOCIOS_MODELO,
            atividades=_ATIVIDADES_MODELO,
            financeiro=self.financeiro(),
            parcerias=self.parcerias(),
        )

    def financeiro(self) -> DadosFinanceiros:
        return DadosFinanceiros(
            receita=Decimal("10000000"),
            lucro=Decimal("1000000"),
            funcionarios=100,
            atualizado_em=self._hoje(),
        )

    def parcerias(self) -> tuple[Parceria, ...]:
        return (
            Parceria(
                empresa="Parceiro Exemplo",
                tipo="Estratégica",
                data=self._hoje(),
                descricao="Parceria ilustrativa gerada para demonstração",
            ),
        )

    def juridico(self) -> DadosJuridicos:
        hoje = self._hoje()
        prefixo = hoje.strftime("%Y%m%d-")
        return DadosJuridicos(
            processos=(
                Processo(
                    numero=f"{prefixo}{self._rng.randint(0, 9999)}",
                    tribunal="TJSP",
                    tipo="Processo Trabalhista",
                    status="Em andamento",
                    data=hoje - timedelta(days=30),
                    valor=Decimal("50000"),
                    partes=("Reclamante Anônimo", "Empresa"),
                ),
                Processo(
                    numero=f"{prefixo}{self._rng.randint(0, 9999)}",
                    tribunal="TJSP",
                    tipo="Processo Civil",
                    status="Concluído",
                    data=hoje - timedelta(days=90),
                    valor=Decimal("25000"),
                    partes=("Consumidor Anônimo", "Empresa"),
                ),
            ),
        )

    def midia(self, razao_social: str) -> DadosMidia:
        return DadosMidia(
            noticias=self.noticias(),
            redes_sociais=self.redes_sociais(),
            reclamacoes=self.reclamacoes(razao_social),
        )

    def noticias(self) -> tuple[Noticia, ...]:
        """Entre 3 e 7 noticias dos ultimos 30 dias."""
        hoje = self._hoje()
        noticias: list[Noticia] = []
        for _ in range(self._rng.randint(3, 7)):
            sentimento = self._sortear_sentimento_noticia()
            titulo, resumo = self._rng.choice(_NOTICIAS_MODELO[sentimento])
            dias_atras = self._rng.randint(0, 29)
            noticias.append(Noticia(
                titulo=titulo,
                fonte=self._rng.choice(_FONTES_NOTICIAS),
                data=hoje - timedelta(days=dias_atras),
                url=f"https://exemplo.com/noticias/{dias_atras}",
                sentimento=sentimento,
                resumo=resumo,
            ))
        return tuple(noticias)

    def redes_sociais(self) -> tuple[MencaoRedeSocial, ...]:
        hoje = self._hoje()
        return tuple(
            MencaoRedeSocial(
                plataforma=nome,
                mencoes=int(base * (self._rng.random() * multiplicador + 1)),
                sentimento=self._rng.choice(list(Sentimento)),
                ultima_mencao=hoje - timedelta(days=self._rng.randint(0, 6)),
            )
            for nome, base, multiplicador in _PLATAFORMAS
        )

    def reclamacoes(self, razao_social: str) -> tuple[Reclamacoes, ...]:
        return tuple(self._reclamacoes_fonte(fonte, base, razao_social) for fonte, base in _FONTES_RECLAMACOES)

    def _reclamacoes_fonte(self, fonte: str, base: int, razao_social: str) -> Reclamacoes:
        total = int(base * (self._rng.random() * 0.5 + 0.75))  # 75% a 125% da base
        resolucao = self._rng.randint(60, 89)
        resolvidas = int(total * resolucao / 100)
        pendentes = int((total - resolvidas) * 0.6)
        return Reclamacoes(
            fonte=fonte,
            quantidade=total,
            ultima_reclamacao=self._hoje() - timedelta(days=self._rng.randint(0, 6)),
            url=url_reclamacoes(fonte, razao_social),
            status=status_reclamacoes(resolucao),
            percentual_resolucao=resolucao,
            detalhes=DetalheReclamacoes(
                resolvidas=resolvidas,
                pendentes=pendentes,
                nao_resolvidas=total - resolvidas - pendentes,
                tempo_medio_resposta=f"{self._rng.randint(24, 71)}h",
            ),
        )

    def _sortear_sentimento_noticia(self) -> Sentimento:
        # ~30% negativas, o restante dividido entre neutras e positivas
        if self._rng.random() > 0.7:
            return Sentimento.NEGATIVO
        if self._rng.random() > 0.5:
            return Sentimento.NEUTRO
        return Sentimento.POSITIVO

    def _data_fundacao(self) -> date:
        intervalo = (_FIM_FUNDACAO - _INICIO_FUNDACAO).days
        return _INICIO_FUNDACAO + timedelta(days=self._rng.randint(0, intervalo))


@dataclass(frozen=True)
class DadosVitrine:
    empresa: Empresa
    juridico: DadosJuridicos
    midia: DadosMidia


def _vitrine_ambev() -> DadosVitrine:
    cnpj = CNPJ(CNPJ_VITRINE)
    razao_social = EMPRESAS_CONHECIDAS[CNPJ_VITRINE]
    empresa = Empresa(
        cnpj=cnpj,
        razao_social=razao_social,
        natureza_juridica="Sociedade Anônima Aberta",
        capital_social=CapitalSocial(Decimal("57899000000.00")),
        situacao="Ativa",
        data_abertura=date(2005, 7, 8),
        endereco=Endereco(
            logradouro="Rua Dr. Renato Paes de Barros",
            numero="1017",
            complemento="3º andar",
            bairro="Itaim Bibi",
            municipio="São Paulo",
            uf="SP",
            cep="04530-001",
        ),
        socios=(
            Socio(nome="Conselho de Administração", documento="-", qualificacao="Administrador"),
        ),
        atividades=(
            Atividade(codigo="1113-5/02", descricao="Fabricação de cervejas e chopes", principal=True),
            Atividade(codigo="1122-4/99", descricao="Fabricação de outras bebidas não alcoólicas", principal=False),
        ),
        financeiro=DadosFinanceiros(
            receita=Decimal("75800000000"),
            lucro=Decimal("12500000000"),
            funcionarios=30000,
            atualizado_em=date(2024, 12, 31),
        ),
        parcerias=(
            Parceria(
                empresa="Cervejaria Colorado",
                tipo="Aquisição",
                data=date(2015, 7, 1),
                descricao="Aquisição da Cervejaria Colorado",
            ),
        ),
    )
    juridico = DadosJuridicos(
        processos=(
            Processo(
                numero="1234567-89.2023.8.26.0100",
                tribunal="TJSP",
                tipo="Processo Civil",
                status="Em andamento",
                data=date(2024, 11, 18),
                valor=Decimal("100000"),
                partes=("Consumidor", razao_social),
            ),
        ),
    )
    midia = DadosMidia(
        noticias=(
            Noticia(
                titulo="Ambev anuncia expansão e novos investimentos",
                fonte="Valor Econômico",
                data=date(2024, 12, 2),
                url="https://exemplo.com/noticias/ambev-expansao",
                sentimento=Sentimento.POSITIVO,
                resumo="Planos de crescimento incluem abertura de novas unidades",
            ),
            Noticia(
                titulo="Ambev recebe prêmio de inovação",
                fonte="InfoMoney",
                data=date(2024, 11, 25),
                url="https://exemplo.com/noticias/ambev-premio",
                sentimento=Sentimento.POSITIVO,
                resumo="Reconhecimento por práticas sustentáveis e inovadoras",
            ),
            Noticia(
                titulo="Ambev anuncia mudanças na diretoria",
                fonte="Reuters",
                data=date(2024, 11, 10),
                url="https://exemplo.com/noticias/ambev-diretoria",
                sentimento=Sentimento.NEUTRO,
                resumo="Novo diretor assume a área comercial",
            ),
        ),
        redes_sociais=(
            MencaoRedeSocial("LinkedIn", 9500, Sentimento.POSITIVO, date(2024, 12, 1)),
            MencaoRedeSocial("Twitter", 42000, Sentimento.NEUTRO, date(2024, 12, 2)),
            MencaoRedeSocial("Instagram", 18000, Sentimento.POSITIVO, date(2024, 12, 2)),
            MencaoRedeSocial("Facebook", 35000, Sentimento.NEUTRO, date(2024, 11, 30)),
        ),
        reclamacoes=(
            Reclamacoes(
                fonte="Reclame Aqui",
                quantidade=950,
                ultima_reclamacao=date(2024, 12, 1),
                url=url_reclamacoes("Reclame Aqui", razao_social),
                status=status_reclamacoes(85),
                percentual_resolucao=85,
                detalhes=DetalheReclamacoes(resolvidas=807, pendentes=86, nao_resolvidas=57, tempo_medio_resposta="30h"),
            ),
            Reclamacoes(
                fonte="Consumidor.gov.br",
                quantidade=420,
                ultima_reclamacao=date(2024, 11, 28),
                url=url_reclamacoes("Consumidor.gov.br", razao_social),
                status=status_reclamacoes(78),
                percentual_resolucao=78,
                detalhes=DetalheReclamacoes(resolvidas=327, pendentes=55, nao_resolvidas=38, tempo_medio_resposta="41h"),
            ),
        ),
    )
    return DadosVitrine(empresa=empresa, juridico=juridico, midia=midia)


_VITRINES: dict[str, Callable[[], DadosVitrine]] = {
    CNPJ_VITRINE: _vitrine_ambev,
}


def buscar_vitrine(cnpj: CNPJ) -> DadosVitrine | None:
    """Conjunto fixo de demonstracao para o CNPJ, se houver."""
    fabrica = _VITRINES.get(cnpj.valor)
    return fabrica() if fabrica is not None else None
