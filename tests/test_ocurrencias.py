from juez.ocurrencias import build_index, kth_occurrence, main, solve


def test_build_index_positions():
    assert build_index([5, 3, 5])[5] == [1, 3]


def test_build_index_invariants():
    values = [4, 1, 4, 4, 2, 1, 9]
    index = build_index(values)
    assert sum(len(p) for p in index.values()) == len(values)
    for value, positions in index.items():
        assert positions == sorted(positions)
        assert all(values[p - 1] == value for p in positions)


def test_kth_occurrence_hits():
    index = build_index([7, 8, 7, 7])
    for k, position in enumerate(index[7], start=1):
        assert kth_occurrence(index, k, 7) == position


def test_kth_occurrence_misses():
    index = build_index([7, 8, 7])
    assert kth_occurrence(index, 3, 7) is None
    assert kth_occurrence(index, 0, 7) is None
    assert kth_occurrence(index, -1, 7) is None
    assert kth_occurrence(index, 1, 99) is None


def test_solve_case():
    text = "5 4\n1 2 1 3 1\n2 1\n4 1\n1 3\n1 7\n"
    assert solve(text) == "3\nNO HAY\n4\nNO HAY\n---\n"


def test_solve_several_cases():
    text = "1 1\n5\n1 5\n2 1\n6 6\n1 6\n3 0\n1 2 3\n"
    assert solve(text).count("---\n") == 3


def test_solve_empty_input():
    assert solve("") == ""


def test_main_reads_file(tmp_path, capsys):
    text = "2 1\n3 3\n2 3\n"
    path = tmp_path / "datos.txt"
    path.write_text(text, encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == solve(text)