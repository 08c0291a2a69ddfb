"""Trigonometric helpers for angles given in radians."""

from __future__ import annotations

import math
import sys


def seno(angulo: float) -> float:
    """Return the sine of an angle in radians."""
    return math.sin(angulo)


def cosseno(angulo: float) -> float:
    """Return the cosine of an angle in radians."""
    return math.cos(angulo)


def tangente(angulo: float) -> float:
    """Return the tangent of an angle in radians."""
    return math.tan(angulo)


def main(argv: list[str] | None = None) -> int:
    """Read an angle (from argv or stdin) and print its sine, cosine and tangent."""
    print("Digite um angulo em radianos: ", end="")
    texto = argv[0] if argv else input()
    try:
        angulo = float(texto.strip())
    except ValueError:
        print(f"\nangulo invalido: {texto!r}", file=sys.stderr)
        return 1

    print(f"Seno: {seno(angulo):f}")
    print(f"Cosseno: {cosseno(angulo):f}")
    print(f"Tangente: {tangente(angulo):f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))