# dossie/domain/risco/enums.py
from enum import Enum


class Severidade(str, Enum):
    ALTA = "high"
    MEDIA = "medium"
    BAIXA = "low"


class Prioridade(str, Enum):
    ALTA = "high"
    MEDIA = "medium"
    BAIXA = "low"


class FaixaRisco(str, Enum):
    BAIXO = "Baixo"
    MODERADO = "Moderado"
    ALTO = "Alto"


class TipoPenalidade(str, Enum):
    PROCESSOS_JUDICIAIS = "PROCESSOS_JUDICIAIS"
    PREJUIZO = "PREJUIZO"
    RECEITA_BAIXA = "RECEITA_BAIXA"
    POUCOS_FUNCIONARIOS = "POUCOS_FUNCIONARIOS"
    NOTICIAS_NEGATIVAS = "NOTICIAS_NEGATIVAS"
    VOLUME_RECLAMACOES = "VOLUME_RECLAMACOES"
    BAIXA_RESOLUCAO = "BAIXA_RESOLUCAO"
    REDES_SOCIAIS_NEGATIVAS = "REDES_SOCIAIS_NEGATIVAS"
