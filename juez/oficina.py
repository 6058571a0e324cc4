"""Employment office: people queue for jobs, longest waiting first."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from pathlib import Path


class OfficeError(Exception):
    """Raised on an invalid operation on the employment office."""


class EmploymentOffice:
    """People registered for jobs; an offer goes to the earliest registered."""

    def __init__(self) -> None:
        # Each job keeps its candidates in registration order.
        self._candidates: dict[str, dict[str, None]] = {}
        self._jobs: dict[str, set[str]] = {}

    def register(self, name: str, job: str) -> None:
        """Register a person for a job; repeated registrations are ignored."""
        jobs = self._jobs.setdefault(name, set())
        if job not in jobs:
            jobs.add(job)
            self._candidates.setdefault(job, {})[name] = None

    def offer(self, job: str) -> str:
        """Give the job to its earliest candidate, who leaves every queue."""
        candidates = self._candidates.get(job)
        if not candidates:
            raise OfficeError("No existen personas apuntadas a este empleo")
        person = next(iter(candidates))
        for other in self._jobs.pop(person):
            queue = self._candidates[other]
            del queue[person]
            if not queue:
                del self._candidates[other]
        return person

    def jobs_of(self, person: str) -> list[str]:
        """Sorted jobs a person is registered for."""
        try:
            return sorted(self._jobs[person])
        except KeyError:
            raise OfficeError("Persona inexistente") from None


class _EndOfInput(Exception):
    pass


def _word(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise _EndOfInput
    return token


def _apply(office: EmploymentOffice, op: str, tokens: Iterator[str]) -> str:
    if op == "altaOficina":
        name, job = _word(tokens), _word(tokens)
        office.register(name, job)
    elif op == "ofertaEmpleo":
        job = _word(tokens)
        return f"{job}: {office.offer(job)}\n"
    elif op == "listadoEmpleos":
        name = _word(tokens)
        jobs = "".join(f" {job}" for job in office.jobs_of(name))
        return f"{name}:{jobs}\n"
    return ""


def solve(text: str) -> str:
    """Run the commands of every case, each ending with ``FIN``."""
    tokens = iter(text.split())
    output: list[str] = []
    try:
        while (op := next(tokens, None)) is not None:
            office = EmploymentOffice()
            while op != "FIN":
                try:
                    output.append(_apply(office, op, tokens))
                except OfficeError as error:
                    output.append(f"ERROR: {error}\n")
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