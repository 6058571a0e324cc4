"""Driving school: students, their teachers and their scores."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path


class NotEnrolledError(Exception):
    """Raised when a student is not enrolled."""

    def __init__(self, student: str) -> None:
        super().__init__(f"El alumno {student} no esta matriculado")
        self.student = student


@dataclass
class _Record:
    teacher: str
    score: int = 0


class DrivingSchool:
    """Students assigned to teachers, each with an accumulated score."""

    def __init__(self) -> None:
        self._students: dict[str, _Record] = {}
        self._by_teacher: dict[str, set[str]] = {}

    def _record(self, student: str) -> _Record:
        try:
            return self._students[student]
        except KeyError:
            raise NotEnrolledError(student) from None

    def enroll(self, student: str, teacher: str) -> None:
        """Enroll a student with a teacher, or move them keeping their score."""
        record = self._students.get(student)
        if record is None:
            self._students[student] = _Record(teacher)
        else:
            self._by_teacher[record.teacher].discard(student)
            record.teacher = teacher
        self._by_teacher.setdefault(teacher, set()).add(student)

    def is_student_of(self, student: str, teacher: str) -> bool:
        """Whether the student is enrolled with this teacher."""
        record = self._students.get(student)
        return record is not None and record.teacher == teacher

    def score(self, student: str) -> int:
        """The student's current score."""
        return self._record(student).score

    def update(self, student: str, points: int) -> None:
        """Add points to the student's score."""
        self._record(student).score += points

    def exam(self, teacher: str, min_points: int) -> list[str]:
        """Sorted students of the teacher with at least min_points."""
        return [
            student
            for student in sorted(self._by_teacher.get(teacher, ()))
            if self._students[student].score >= min_points
        ]

    def pass_student(self, student: str) -> None:
        """Remove a student who has passed."""
        record = self._record(student)
        del self._students[student]
        self._by_teacher[record.teacher].discard(student)


class _EndOfInput(Exception):
    pass


def _word(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise _EndOfInput
    return token


def _apply(school: DrivingSchool, op: str, tokens: Iterator[str]) -> list[str]:
    if op == "alta":
        student, teacher = _word(tokens), _word(tokens)
        school.enroll(student, teacher)
    elif op == "es_alumno":
        student, teacher = _word(tokens), _word(tokens)
        negation = "" if school.is_student_of(student, teacher) else " no"
        return [f"{student}{negation} es alumno de {teacher}\n"]
    elif op == "examen":
        teacher, points = _word(tokens), int(_word(tokens))
        students = school.exam(teacher, points)
        return [f"Alumnos de {teacher} a examen:\n", *(f"{s}\n" for s in students)]
    elif op == "actualizar":
        student, points = _word(tokens), int(_word(tokens))
        school.update(student, points)
    elif op == "puntuacion":
        student = _word(tokens)
        return [f"Puntuacion de {student}: {school.score(student)}\n"]
    elif op == "aprobar":
        school.pass_student(_word(tokens))
    return []


def solve(text: str) -> str:
    """Run the commands of every case, each ending with ``FIN``."""
    tokens = iter(text.split())
    output: list[str] = []
    try:
        while (op := next(tokens, None)) is not None:
            school = DrivingSchool()
            while op != "FIN":
                try:
                    output.extend(_apply(school, op, tokens))
                except NotEnrolledError:
                    output.append("ERROR\n")
                op = _word(tokens)
            output.append("---\n")
    except _EndOfInput:
        pass
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Read from the file named in argv, or from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = Path(args[0]).read_text(encoding="utf-8") if args else sys.stdin.read()
    sys.stdout.write(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())