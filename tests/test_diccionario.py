import pytest

from juez.diccionario import diff_dictionaries, format_diff, parse_dictionary, solve


def test_parse_pairs():
    assert parse_dictionary("a 1 b 2") == {"a": "1", "b": "2"}


def test_parse_empty_line():
    assert parse_dictionary("   ") == {}


def test_parse_later_key_overwrites():
    assert parse_dictionary("k x k y") == {"k": "y"}


def test_diff_classifies_keys():
    old = {"a": "1", "b": "2"}
    new = {"b": "3", "c": "4"}
    assert diff_dictionaries(old, new) == (["c"], ["a"], ["b"])


def test_diff_identical_is_empty():
    table = {"x": "1", "y": "2"}
    assert diff_dictionaries(table, dict(table)) == ([], [], [])


@pytest.mark.parametrize(
    "old,new",
    [
        ({"z": "1", "a": "2", "m": "3"}, {"b": "1", "y": "2"}),
        ({}, {"q": "1", "c": "2"}),
    ],
)
def test_diff_lists_are_sorted_and_disjoint(old, new):
    added, removed, changed = diff_dictionaries(old, new)
    assert added == sorted(added)
    assert removed == sorted(removed)
    assert not set(added) & set(removed)
    assert set(added) | set(removed) | set(changed) <= set(old) | set(new)


def test_format_no_changes():
    assert format_diff([], [], []) == "Sin cambios\n---\n"


def test_format_skips_empty_groups():
    assert format_diff(["x", "w"], [], ["y"]) == "+ x w\n* y\n---\n"


def test_solve_two_cases():
    text = "2\na 1 b 2\nb 3 c 4\nk v\nk v\n"
    assert solve(text) == "+ c\n- a\n* b\n---\nSin cambios\n---\n"


def test_solve_missing_lines_count_as_empty():
    assert solve("1\nk v\n") == "- k\n---\n"