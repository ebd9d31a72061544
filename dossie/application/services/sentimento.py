# dossie/application/services/sentimento.py
"""Classificador de sentimento por palavras-chave. Puro, sem IO."""
from __future__ import annotations

import unicodedata

from dossie.domain.midia.enums import Sentimento

PALAVRAS_POSITIVAS = ("crescimento", "lucro", "sucesso", "inovacao", "sustentavel", "premiada", "lider")
PALAVRAS_NEGATIVAS = ("multa", "processo", "reclamacao", "prejuizo", "investigacao", "denuncia")


def _sem_acentos(texto: str) -> str:
    decomposto = unicodedata.normalize("NFKD", texto)
    return "".join(c for c in decomposto if not unicodedata.combining(c))


def classificar_sentimento(texto: str) -> Sentimento:
    """+1 por palavra positiva presente, -1 por negativa. Empate = neutro."""
    alvo = _sem_acentos(texto.lower())
    saldo = sum(1 for p in PALAVRAS_POSITIVAS if p in alvo)
    saldo -= sum(1 for p in PALAVRAS_NEGATIVAS if p in alvo)
    if saldo > 0:
        return Sentimento.POSITIVO
    if saldo < 0:
        return Sentimento.NEGATIVO
    return Sentimento.NEUTRO
