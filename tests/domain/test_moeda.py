# tests/domain/test_moeda.py
from decimal import Decimal

from dossie.domain.moeda import formatar_moeda, trocar_separadores


def test_separadores_pt_br():
    assert trocar_separadores("1,234,567.89") == "1.234.567,89"


def test_negativo_leva_sinal_antes_do_simbolo():
    assert formatar_moeda(Decimal("-1000")) == "-R$ 1.000,00"
    assert formatar_moeda(Decimal("-0.5")) == "-R$ 0,50"
