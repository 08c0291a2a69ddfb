import math

import pytest

from chavesarena.matematica import cosseno, main, seno, tangente


def test_values_at_zero():
    assert seno(0) == 0
    assert cosseno(0) == 1
    assert tangente(0) == 0


@pytest.mark.parametrize("angulo", [-2.0, -0.3, 0.5, 1.0, 2.7, 10.0])
def test_pythagorean_identity(angulo):
    assert seno(angulo) ** 2 + cosseno(angulo) ** 2 == pytest.approx(1.0)


@pytest.mark.parametrize("angulo", [-1.2, 0.4, 1.0, 2.0])
def test_tangent_is_sine_over_cosine(angulo):
    assert tangente(angulo) == pytest.approx(seno(angulo) / cosseno(angulo))


def test_quarter_turn():
    assert seno(math.pi / 2) == pytest.approx(1.0)
    assert cosseno(math.pi / 2) == pytest.approx(0.0, abs=1e-12)


def test_main_with_argument(capsys):
    assert main(["0"]) == 0
    out = capsys.readouterr().out
    assert "Seno: 0.000000" in out
    assert "Cosseno: 1.000000" in out
    assert "Tangente: 0.000000" in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda: "0")
    assert main([]) == 0
    assert capsys.readouterr().out.startswith("Digite um angulo em radianos: ")


def test_main_rejects_invalid_angle(capsys):
    assert main(["abc"]) == 1
    assert "abc" in capsys.readouterr().err