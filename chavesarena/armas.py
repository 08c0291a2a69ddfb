"""Attack and defence weapons used by the characters in the arena."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class ArmaAtaque(ABC):
    """A weapon that deals damage within a strength range."""

    def __init__(self, descricao: str, min_forca: int, max_forca: int) -> None:
        self.descricao = descricao
        self.min_forca = min_forca
        self.max_forca = max_forca

    def descricao_completa(self) -> str:
        """Return the description followed by the strength range."""
        return f"{self.descricao}\t[{self.min_forca},{self.max_forca}]"

    @abstractmethod
    def forca_ataque(self) -> int:
        """Return the strength of one attack."""

    @abstractmethod
    def ruido_ataque(self) -> str:
        """Return the sound the weapon makes when striking."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.descricao!r}, "
            f"{self.min_forca}, {self.max_forca})"
        )


class _ArmaForcaMaxima(ArmaAtaque):
    """An attack weapon that always strikes at its maximum strength."""

    ruido = ""

    def forca_ataque(self) -> int:
        return self.max_forca

    def ruido_ataque(self) -> str:
        return self.ruido


class Rosa(_ArmaForcaMaxima):
    ruido = "plin plin"


class BolaQuadrada(_ArmaForcaMaxima):
    ruido = "Boing Boing"


class GarrafaDeRefrigerante(_ArmaForcaMaxima):
    ruido = "Ploft"


class Martelo(_ArmaForcaMaxima):
    ruido = "Bam Bam"


class Pneu(_ArmaForcaMaxima):
    ruido = "Puff Puff"


class TacaDeAgua(_ArmaForcaMaxima):
    ruido = "Splash"


class Colher(ArmaAtaque):
    """A spoon: its strength is the width of its range."""

    def forca_ataque(self) -> int:
        return self.max_forca - self.min_forca

    def ruido_ataque(self) -> str:
        return "cush cush"


@dataclass
class ArmaDefesa:
    """A protective item that absorbs a fixed amount of damage."""

    descricao: str
    resistencia: int


class Escudo(ArmaDefesa):
    pass


class Chapeu(ArmaDefesa):
    pass


class Boina(ArmaDefesa):
    pass


class Balde(ArmaDefesa):
    pass


class Mochila(ArmaDefesa):
    pass


class Tambor(ArmaDefesa):
    pass