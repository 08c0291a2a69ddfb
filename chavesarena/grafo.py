"""Undirected graph stored as adjacency lists."""

from __future__ import annotations


class Grafo:
    """An undirected graph over vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def _checar(self, v: int) -> None:
        if not 0 <= v < self.vertices:
            raise IndexError(f"vertex {v} out of range")

    def adicionar_aresta(self, v: int, w: int) -> None:
        """Add an undirected edge between ``v`` and ``w``."""
        self._checar(v)
        self._checar(w)
        self._adj[v].append(w)
        self._adj[w].append(v)

    def sao_adjacentes(self, v: int, w: int) -> bool:
        """Return True when an edge joins ``v`` to ``w``."""
        self._checar(v)
        return w in self._adj[v]

    def vizinhos(self, v: int) -> list[int]:
        """Return the neighbours of ``v`` in insertion order."""
        self._checar(v)
        return list(self._adj[v])


_ARESTAS = [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]


def main(argv: list[str] | None = None) -> int:
    """Build the sample five-vertex graph and describe vertex 1."""
    g = Grafo(5)
    for v, w in _ARESTAS:
        g.adicionar_aresta(v, w)

    resposta = "Sim" if g.sao_adjacentes(1, 2) else "Não"
    print(f"Os vértices 1 e 2 são adjacentes?: {resposta}")
    print("Vizinhos do vértice 1: " + "".join(f"{i} " for i in g.vizinhos(1)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())