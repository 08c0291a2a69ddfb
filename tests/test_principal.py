import random

from chavesarena.principal import main, montar_simulador


def test_teams_start_balanced():
    sim = montar_simulador(random.Random(1))
    assert sim.vida_equipe(1) == 300
    assert sim.vida_equipe(1) == sim.vida_equipe(2)


def test_sample_battle_finishes():
    sim = montar_simulador(random.Random(5))
    relatorios = list(sim.rodadas())
    assert relatorios
    assert min(sim.vida_equipe(1), sim.vida_equipe(2)) == 0
    assert all("Dano causado = 9\n" in r for r in relatorios)


def test_same_seed_same_battle():
    a = list(montar_simulador(random.Random(11)).rodadas())
    b = list(montar_simulador(random.Random(11)).rodadas())
    assert a == b


def test_main_prints_battle(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "Dano causado = 9" in out
    assert "Equipe 1 " in out