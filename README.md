# chavesarena

A small console battle simulator starring the cast of *Chaves*, bundled with
three tiny utilities: a circle type, trigonometric helpers and an undirected
graph.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The battle simulator

The sample battle puts two teams of three characters against each other until
one team has no life left. Each round a random team attacks: a random living
character from it strikes a random living character of the other team. Damage
is the attack weapon's force minus the defender's resistance (never below
zero), and a defender's life never drops below zero. Every round is printed
with the weapon used, the damage, the attacker's catchphrase when damage was
dealt, and the current life of both teams.

```
chavesarena
```

The teams are built by `chavesarena.principal.montar_simulador`, which takes an
optional `random.Random`, so a battle can be replayed:

```python
import random
from chavesarena.principal import montar_simulador

simulador = montar_simulador(random.Random(42))
simulador.iniciar_simulacao()
print(simulador.vida_equipe(1), simulador.vida_equipe(2))
```

`Simulador.rodadas()` yields each round's report as a string instead of
printing it, and `Simulador.combate(atacante, defensor)` resolves a single
attack and returns the damage. Characters are added with
`adicionar_personagem(personagem, equipe)` and removed by id with
`remover_personagem(personagem, equipe)`; teams are numbered 1 and 2, and any
other number raises `ValueError`.

The building blocks live in their own modules:

- `chavesarena.armas` — attack weapons (`Rosa`, `Colher`, `BolaQuadrada`,
  `GarrafaDeRefrigerante`, `Martelo`, `Pneu`, `TacaDeAgua`) and defence items
  (`Escudo`, `Chapeu`, `Boina`, `Balde`, `Mochila`, `Tambor`). Every attack
  weapon strikes at its maximum force except `Colher`, whose force is the
  width of its range.
- `chavesarena.personagens` — the characters (`Chaves`, `Chiquinha`,
  `SeuMadruga`, `ProfessorGirafales`, `Quico`, `DonaFlorinda`), each with a
  catchphrase from `bordao()`.
- `chavesarena.simulador` — `Simulador`, which holds the two teams and runs
  the fight.

The teams of the `chavesarena` command are fixed in code; there is no option
to choose characters or weapons from the command line.

## Utilities

Circle areas, radii and a concentricity check for two sample circles:

```
chavesarena-circulo
```

Sine, cosine and tangent of an angle in radians typed at the prompt (an
entry that is not a number is reported and the command exits with status 1):

```
chavesarena-matematica
```

Adjacency and neighbours in a five-vertex sample graph:

```
chavesarena-grafo
```

The same functionality is available from Python:

```python
from chavesarena.circulo import Circulo
from chavesarena.grafo import Grafo
from chavesarena.matematica import seno

print(Circulo(0, 0, 2).concentrico(Circulo(0, 0, 5)))  # True

g = Grafo(3)
g.adicionar_aresta(0, 1)
print(g.sao_adjacentes(1, 0))  # True
print(g.vizinhos(0))           # [1]
print(seno(0.0))               # 0.0
```

`Grafo` raises `IndexError` for a vertex outside `0 .. vertices - 1` and
`ValueError` for a negative number of vertices.