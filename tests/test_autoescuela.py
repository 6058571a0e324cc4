import pytest

from juez.autoescuela import DrivingSchool, NotEnrolledError, solve


@pytest.fixture
def school():
    return DrivingSchool()


def test_enroll_and_check(school):
    school.enroll("ana", "pepe")
    assert school.is_student_of("ana", "pepe") is True
    assert school.is_student_of("ana", "luis") is False
    assert school.is_student_of("nadie", "pepe") is False


def test_new_student_starts_at_zero(school):
    school.enroll("ana", "pepe")
    assert school.score("ana") == 0


def test_updates_accumulate(school):
    school.enroll("ana", "pepe")
    school.update("ana", 7)
    school.update("ana", 3)
    assert school.score("ana") == 10


def test_reenroll_moves_and_keeps_score(school):
    school.enroll("ana", "pepe")
    school.update("ana", 4)
    school.enroll("ana", "luis")
    assert school.is_student_of("ana", "luis")
    assert school.score("ana") == 4
    assert school.exam("pepe", 0) == []
    assert school.exam("luis", 0) == ["ana"]


def test_exam_sorted_and_filtered(school):
    for student, points in [("carla", 9), ("ana", 5), ("bea", 1)]:
        school.enroll(student, "pepe")
        school.update(student, points)
    assert school.exam("pepe", 5) == ["ana", "carla"]
    assert school.exam("pepe", 100) == []


def test_pass_student_removes(school):
    school.enroll("ana", "pepe")
    school.pass_student("ana")
    assert not school.is_student_of("ana", "pepe")
    with pytest.raises(NotEnrolledError, match="El alumno ana no esta matriculado"):
        school.score("ana")


def test_score_unknown_raises(school):
    with pytest.raises(NotEnrolledError, match="El alumno x no esta matriculado"):
        school.score("x")


def test_pass_unknown_raises(school):
    with pytest.raises(NotEnrolledError, match="El alumno x no esta matriculado"):
        school.pass_student("x")


def test_update_unknown_raises(school):
    with pytest.raises(NotEnrolledError, match="El alumno x no esta matriculado"):
        school.update("x", 1)


def test_solve_session():
    text = (
        "alta ana pepe\n"
        "es_alumno ana pepe\n"
        "es_alumno ana luis\n"
        "actualizar ana 4\n"
        "puntuacion ana\n"
        "examen pepe 4\n"
        "puntuacion nadie\n"
        "FIN\n"
    )
    assert solve(text) == (
        "ana es alumno de pepe\n"
        "ana no es alumno de luis\n"
        "Puntuacion de ana: 4\n"
        "Alumnos de pepe a examen:\n"
        "ana\n"
        "ERROR\n"
        "---\n"
    )