# dossie/domain/midia/enums.py
from enum import Enum


class Sentimento(str, Enum):
    POSITIVO = "positive"
    NEGATIVO = "negative"
    NEUTRO = "neutral"
