import pytest

from chavesarena.grafo import Grafo, main

ARESTAS = [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]


@pytest.fixture
def grafo():
    g = Grafo(5)
    for v, w in ARESTAS:
        g.adicionar_aresta(v, w)
    return g


def test_edges_are_symmetric(grafo):
    for v, w in ARESTAS:
        assert grafo.sao_adjacentes(v, w)
        assert grafo.sao_adjacentes(w, v)


def test_missing_edge_is_not_adjacent(grafo):
    assert grafo.sao_adjacentes(0, 2) is False
    assert grafo.sao_adjacentes(2, 4) is False


def test_neighbours_in_insertion_order(grafo):
    assert grafo.vizinhos(1) == [0, 2, 3, 4]
    assert grafo.vizinhos(0) == [1, 4]


def test_neighbour_list_is_a_copy(grafo):
    vizinhos = grafo.vizinhos(2)
    vizinhos.append(99)
    assert 99 not in grafo.vizinhos(2)


def test_empty_graph_has_no_neighbours():
    g = Grafo(3)
    assert g.vizinhos(0) == []


def test_out_of_range_vertex_raises():
    g = Grafo(2)
    with pytest.raises(IndexError):
        g.adicionar_aresta(0, 2)
    with pytest.raises(IndexError):
        g.vizinhos(-1)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Grafo(-1)


def test_main_output(capsys):
    assert main() == 0
    linhas = capsys.readouterr().out.splitlines()
    assert linhas[0] == "Os vértices 1 e 2 são adjacentes?: Sim"
    assert linhas[1] == "Vizinhos do vértice 1: 0 2 3 4 "