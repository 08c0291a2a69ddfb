"""Sample battle between two teams of three characters."""

from __future__ import annotations

import random

from chavesarena.armas import (
    Balde,
    Boina,
    BolaQuadrada,
    Chapeu,
    Escudo,
    GarrafaDeRefrigerante,
    Martelo,
    Mochila,
    Pneu,
    Rosa,
)
from chavesarena.personagens import (
    Chaves,
    Chiquinha,
    DonaFlorinda,
    ProfessorGirafales,
    Quico,
    SeuMadruga,
)
from chavesarena.simulador import Simulador


def montar_simulador(rng: random.Random | None = None) -> Simulador:
    """Build the simulator with the two sample teams."""
    rosa = Rosa("Rosa", 0, 10)
    bola_quadrada = BolaQuadrada("Bola Quadrada", 0, 10)
    garrafa = GarrafaDeRefrigerante("Garrafa de Refrigerante", 0, 10)
    martelo = Martelo("Martelo", 0, 10)
    pneu = Pneu("Pneu", 0, 10)

    escudo = Escudo("Escudo", 1)
    chapeu = Chapeu("Chapeu", 1)
    boina = Boina("Boina", 1)
    balde = Balde("Balde", 1)
    mochila = Mochila("Mochila", 1)

    simulador = Simulador(rng)
    equipe1 = [
        Chaves(1, "Chaves Eq1", 100, rosa, escudo),
        Chiquinha(1, "Chiquinha Eq1", 100, bola_quadrada, boina),
        SeuMadruga(1, "Seu Madruga Eq1", 100, martelo, mochila),
    ]
    equipe2 = [
        ProfessorGirafales(2, "Professor Girafales Eq2", 100, rosa, chapeu),
        Quico(2, "Quico Eq2", 100, garrafa, balde),
        DonaFlorinda(2, "Dona Florinda Eq2", 100, pneu, mochila),
    ]
    for personagem in equipe1:
        simulador.adicionar_personagem(personagem, 1)
    for personagem in equipe2:
        simulador.adicionar_personagem(personagem, 2)
    return simulador


def main(argv: list[str] | None = None) -> int:
    """Run the sample battle and print every round."""
    montar_simulador().iniciar_simulacao()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())