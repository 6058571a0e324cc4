import pytest

from juez.horas import Hora


def test_format_pads_with_zeros():
    assert str(Hora(1, 2, 3)) == "01:02:03"


@pytest.mark.parametrize("text", ["00:00:00", "12:34:56", "23:59:59", "07:05:09"])
def test_parse_round_trip(text):
    assert str(Hora.parse(text)) == text


def test_parse_accepts_other_separators():
    assert Hora.parse("10.20.30") == Hora.parse("10:20:30")


@pytest.mark.parametrize("args", [(24, 0, 0), (0, 60, 0), (0, 0, 60), (-1, 0, 0)])
def test_invalid_fields(args):
    with pytest.raises(ValueError):
        Hora(*args)


@pytest.mark.parametrize("text", ["abc", "12:34", "25:00:00"])
def test_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        Hora.parse(text)


def test_hour_in_seconds():
    assert Hora(1, 0, 0).total_seconds == 3600


def test_addition_sums_seconds():
    a = Hora(10, 15, 40)
    b = Hora(2, 50, 30)
    assert (a + b).total_seconds == a.total_seconds + b.total_seconds


def test_addition_overflow():
    with pytest.raises(OverflowError):
        Hora(23, 59, 59) + Hora(0, 0, 1)


def test_last_second_of_day():
    assert str(Hora.from_seconds(86399)) == "23:59:59"


def test_ordering():
    early, late = Hora(1, 0, 0), Hora(2, 0, 0)
    assert early < late
    assert not late < early
    assert sorted([late, early]) == [early, late]
    assert Hora(1, 0, 0) == early