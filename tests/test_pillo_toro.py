import io

import pytest

from juez.pillo_toro import main, solve, tally_corrections


@pytest.mark.parametrize(
    ("pairs", "expected"),
    [
        ([("Ana", "CORRECTO"), ("Ana", "INCORRECTO")], {}),
        ([("Luis", "CORRECTO")] * 3, {"Luis": 3}),
        ([("Eva", "INCORRECTO")], {"Eva": -1}),
    ],
)
def test_tally(pairs, expected):
    assert tally_corrections(pairs) == expected


def test_names_sorted_and_kept_whole():
    pairs = [("Zoe Ruiz", "CORRECTO"), ("Ana Gil", "CORRECTO"), ("Mario", "INCORRECTO")]
    table = tally_corrections(pairs)
    assert list(table) == ["Ana Gil", "Mario", "Zoe Ruiz"]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (
            "3\nJuan Perez\nCORRECTO\nAna\nINCORRECTO\nJuan Perez\nCORRECTO\n0\n",
            "Ana, -1\nJuan Perez, 2\n---\n",
        ),
        ("0\n1\nAna\nCORRECTO\n", ""),
        ("2\nAna\nCORRECTO\nAna\nMAL\n0\n", "---\n"),
    ],
)
def test_solve(text, expected):
    assert solve(text) == expected


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nAna\nCORRECTO\n0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Ana, 1\n---\n"