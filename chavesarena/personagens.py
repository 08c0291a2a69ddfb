"""Characters that fight in the arena, each armed for attack and defence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from chavesarena.armas import ArmaAtaque, ArmaDefesa


@dataclass(eq=False)
class Personagem(ABC):
    """A fighter with an identifier, a name, hit points and two weapons."""

    id: int
    nome: str
    vida: int
    arma_ataque: ArmaAtaque
    arma_defesa: ArmaDefesa

    def gerar_ataque(self) -> int:
        """Return the strength of this character's next attack."""
        return self.arma_ataque.forca_ataque()

    def criar_defesa(self) -> int:
        """Return how much damage this character's defence absorbs."""
        return self.arma_defesa.resistencia

    @abstractmethod
    def bordao(self) -> str:
        """Return the character's catchphrase."""


class Chaves(Personagem):
    def bordao(self) -> str:
        return "Foi sem querer querendo!"


class Chiquinha(Personagem):
    def bordao(self) -> str:
        return "O que voce tem de burro, voce tem de burro!"


class SeuMadruga(Personagem):
    def bordao(self) -> str:
        return "So nao te dou outra por que..."


class ProfessorGirafales(Personagem):
    def bordao(self) -> str:
        return "Sileeeencio, criança!"


class Quico(Personagem):
    def bordao(self) -> str:
        return "Gentalha, gentalha!"


class DonaFlorinda(Personagem):
    def bordao(self) -> str:
        return "E da proxima vez, va lutar com sua avo!"