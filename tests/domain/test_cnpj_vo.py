# tests/domain/test_cnpj_vo.py
import dataclasses
from decimal import Decimal

import pytest

from dossie.domain.empresa.value_objects import (
    CNPJ,
    CapitalSocial,
    Endereco,
    cnpj_valido,
    formatar_cnpj,
    normalizar_cnpj,
)


def test_cnpj_valido_formatado():
    """Aceita CNPJ com pontuacao e armazena sem formatacao."""
    cnpj = CNPJ("11.222.333/0001-81")
    assert cnpj.valor == "11222333000181"


def test_cnpj_valido_sem_formatacao():
    """Aceita CNPJ sem pontuacao e gera formatacao."""
    cnpj = CNPJ("11222333000181")
    assert cnpj.formatado == "11.222.333/0001-81"


def test_cnpj_digitos_verificadores_invalidos():
    """Rejeita CNPJ com digitos verificadores errados."""
    with pytest.raises(ValueError, match="CNPJ invalido"):
        CNPJ("11.222.333/0001-99")


def test_cnpj_todos_iguais_invalido():
    """CNPJs com todos digitos iguais sao invalidos, mesmo quando a conta fecha."""
    with pytest.raises(ValueError):
        CNPJ("00.000.000/0000-00")
    with pytest.raises(ValueError):
        CNPJ("11111111111111")


def test_cnpj_comprimento_errado():
    """Rejeita strings com menos ou mais de 14 digitos."""
    with pytest.raises(ValueError):
        CNPJ("123")
    with pytest.raises(ValueError):
        CNPJ("123456789012345")


def test_cnpj_imutavel():
    """frozen=True impede atribuicao."""
    cnpj = CNPJ("11222333000181")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cnpj._valor = "outro"  # type: ignore[misc]


def test_cnpj_igualdade_por_valor():
    """Dois CNPJs com mesmo numero sao iguais, independente de formatacao."""
    a = CNPJ("11222333000181")
    b = CNPJ("11.222.333/0001-81")
    assert a == b
    assert hash(a) == hash(b)


def test_cnpj_desigualdade():
    a = CNPJ("11222333000181")
    b = CNPJ("33000167000101")  # outro CNPJ valido
    assert a != b


def test_cnpj_repr_e_str_mostram_formatado():
    cnpj = CNPJ("11222333000181")
    assert "11.222.333/0001-81" in repr(cnpj)
    assert str(cnpj) == "11.222.333/0001-81"


# ---------- funcoes livres ----------


def test_normalizar_remove_nao_digitos():
    assert normalizar_cnpj("07.526.557/0001-00") == "07526557000100"
    assert normalizar_cnpj(" 07 526 557 0001 00 ") == "07526557000100"
    assert normalizar_cnpj("abc") == ""


@pytest.mark.parametrize(
    "entrada",
    ["07526557000100", "07.526.557/0001-00", "11222333000181", "33.000.167/0001-01"],
)
def test_cnpj_valido_aceita_conhecidos(entrada):
    assert cnpj_valido(entrada)


@pytest.mark.parametrize(
    "entrada",
    ["", "123", "00000000000000", "99999999999999", "07526557000101", "075265570001000"],
)
def test_cnpj_valido_rejeita(entrada):
    assert not cnpj_valido(entrada)


def test_formatar_cnpj_14_digitos():
    assert formatar_cnpj("07526557000100") == "07.526.557/0001-00"


def test_formatar_cnpj_entrada_curta_volta_intacta():
    assert formatar_cnpj("1234") == "1234"


def test_normalizar_formatar_normalizar_idempotente():
    for entrada in ("07526557000100", "11.222.333/0001-81", "123", "a1b2"):
        assert normalizar_cnpj(formatar_cnpj(normalizar_cnpj(entrada))) == normalizar_cnpj(entrada)


# ---------- demais value objects ----------


def test_capital_social_negativo_invalido():
    with pytest.raises(ValueError, match="negativo"):
        CapitalSocial(Decimal("-0.01"))


def test_endereco_linha_unica_ignora_partes_vazias():
    endereco = Endereco("Rua A", "10", "", "Centro", "Curitiba", "PR", "")
    assert endereco.linha_unica() == "Rua A, 10 - Centro - Curitiba/PR"
