import pytest

from juez.elecciones import ElectionError, VoteCount, solve


@pytest.fixture
def count():
    c = VoteCount()
    c.new_state("Ohio", 10)
    c.new_state("Texas", 30)
    return c


def test_no_votes_yet(count):
    assert count.winner_in("Ohio") == ""
    assert count.results() == []


def test_leader_takes_electors(count):
    count.add_votes("Ohio", "Azul", 5)
    assert count.winner_in("Ohio") == "Azul"
    assert count.results() == [("Azul", 10)]


def test_overtake_moves_electors(count):
    count.add_votes("Ohio", "Azul", 5)
    count.add_votes("Ohio", "Rojo", 6)
    assert count.winner_in("Ohio") == "Rojo"
    assert count.results() == [("Rojo", 10)]


def test_tie_keeps_leader(count):
    count.add_votes("Ohio", "Azul", 5)
    count.add_votes("Ohio", "Rojo", 5)
    assert count.winner_in("Ohio") == "Azul"


def test_results_sorted_by_party(count):
    count.add_votes("Texas", "Zeta", 3)
    count.add_votes("Ohio", "Alfa", 3)
    assert count.results() == [("Alfa", 10), ("Zeta", 30)]


def test_votes_accumulate(count):
    count.add_votes("Ohio", "Azul", 5)
    count.add_votes("Ohio", "Rojo", 4)
    count.add_votes("Ohio", "Rojo", 4)
    assert count.winner_in("Ohio") == "Rojo"
    assert [party for party, _ in count.results()] == ["Rojo"]


def test_zero_vote_leader_keeps_electors(count):
    count.add_votes("Ohio", "Azul", 0)
    count.add_votes("Ohio", "Rojo", 3)
    assert count.winner_in("Ohio") == "Rojo"
    assert count.results() == [("Azul", 10), ("Rojo", 10)]


def test_errors(count):
    with pytest.raises(ElectionError, match="Estado ya existente"):
        count.new_state("Ohio", 1)
    with pytest.raises(ElectionError, match="Estado no encontrado"):
        count.add_votes("Nada", "Azul", 1)
    with pytest.raises(ElectionError, match="Estado no encontrado"):
        count.winner_in("Nada")


def test_solve():
    text = (
        "nuevo_estado Ohio 10\n"
        "nuevo_estado Ohio 4\n"
        "sumar_votos Ohio Azul 7\n"
        "ganador_en Ohio\n"
        "ganador_en Utah\n"
        "resultados\n"
        "FIN\n"
    )
    assert solve(text) == (
        "Estado ya existente\n"
        "Ganador en Ohio: Azul\n"
        "Estado no encontrado\n"
        "Azul 10\n"
        "---\n"
    )