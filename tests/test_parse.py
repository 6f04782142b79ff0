import pytest

from app.services.parse import build_input, to_float, to_int


@pytest.mark.parametrize("raw, expected", [
    ("353655.92", 353655.92),
    ("12.5abc", 12.5),
    ("  7", 7.0),
    (".5", 0.5),
    ("-3.2", -3.2),
    ("1e3", 1000.0),
    (42, 42.0),
    ("abc", 0.0),
    ("", 0.0),
    (None, 0.0),
    (True, 0.0),
    (float("nan"), 0.0),
    (float("inf"), 0.0),
    ("Infinity", 0.0),
])
def test_to_float(raw, expected):
    assert to_float(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("3", 3),
    ("3.9", 3),
    (3.9, 3),
    (-2.5, -2),
    ("-4", -4),
    ("12 años", 12),
    ("x", 0),
    ("", 0),
    (None, 0),
    (False, 0),
])
def test_to_int(raw, expected):
    assert to_int(raw) == expected


def test_build_input_maps_form_fields():
    inp = build_input({
        "sueldoBasico": "400000",
        "antiguedad": "5.7",
        "haberComisario": 600000,
        "dto277": "80000",
        "seguroVida": "1500.5",
        "porcentajeAumento": "-10",
    })
    assert inp.basico_base == 400000
    assert inp.anios_antiguedad == 5
    assert inp.haber_comisario_base == 600000
    assert inp.dto277 == 80000
    assert inp.seguro_vida == 1500.5
    assert inp.porcentaje_aumento == -10


def test_build_input_missing_and_invalid_default_to_zero(caplog):
    with caplog.at_level("WARNING"):
        inp = build_input({"sueldoBasico": "no sé", "antiguedad": None})
    assert inp.basico_base == 0
    assert inp.anios_antiguedad == 0
    assert inp.dto277 == 0
    assert inp.porcentaje_aumento == 0
    assert "sueldoBasico" in caplog.text


@pytest.mark.parametrize("raw", [
    "1" + "0" * 400,
    "1" * 5000,
    10 ** 400,
])
def test_to_int_out_of_float_range_is_zero(raw):
    assert to_int(raw) == 0


def test_to_float_huge_int_is_zero():
    assert to_float(10 ** 400) == 0.0
    assert to_float("9" * 5000) == 0.0


def test_build_input_huge_antiguedad():
    inp = build_input({"sueldoBasico": "100000", "antiguedad": "1" * 5000})
    assert inp.anios_antiguedad == 0
    assert inp.basico_base == 100000
