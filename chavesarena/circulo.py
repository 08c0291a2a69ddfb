"""Circles on the plane: area, radius and concentricity."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Circulo:
    """A circle with centre (x, y) and radius ``raio``."""

    x: float
    y: float
    raio: float

    def area(self) -> float:
        """Return the area of the circle."""
        return math.pi * (self.raio * self.raio)

    def concentrico(self, outro: Circulo) -> bool:
        """Return True when both circles share the same centre."""
        return self.x == outro.x and self.y == outro.y


def main(argv: list[str] | None = None) -> int:
    """Show area, radius and concentricity of two sample circles."""
    c1 = Circulo(1, 1, 1)
    c2 = Circulo(0, 0, 2)

    print(f"Area do circulo 1: {c1.area():f}")
    print(f"Area do circulo 2: {c2.area():f}")
    print(f"Raio do circulo 1: {c1.raio:f}")
    print(f"Raio do circulo 2: {c2.raio:f}")

    if c1.concentrico(c2):
        print("Os dois circulos tem o mesmo centro")
    else:
        print("Os dois circulos nao tem o mesmo centro")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())