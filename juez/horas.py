"""Times of day with second precision."""

from __future__ import annotations

import re
from functools import total_ordering

_SECONDS_PER_HOUR = 3600
_SECONDS_PER_MINUTE = 60
_SECONDS_PER_DAY = 86400
_PATTERN = re.compile(r"\s*([+-]?\d+)\s*(\S)\s*([+-]?\d+)\s*(\S)\s*([+-]?\d+)\s*")


@total_ordering
class Hora:
    """A time of day, stored as seconds since midnight."""

    __slots__ = ("_seconds",)

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        if not (0 <= hours < 24 and 0 <= minutes < 60 and 0 <= seconds < 60):
            raise ValueError("Argumentos no validos")
        self._seconds = hours * _SECONDS_PER_HOUR + minutes * _SECONDS_PER_MINUTE + seconds

    @classmethod
    def from_seconds(cls, seconds: int) -> Hora:
        """Build a time from a count of seconds, without validation."""
        hora = cls.__new__(cls)
        hora._seconds = seconds
        return hora

    @classmethod
    def parse(cls, text: str) -> Hora:
        """Parse ``hh:mm:ss``; any single character may separate the fields."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"hora mal formada: {text!r}")
        return cls(int(match.group(1)), int(match.group(3)), int(match.group(5)))

    @property
    def total_seconds(self) -> int:
        """Seconds since midnight."""
        return self._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Hora):
            return NotImplemented
        return self._seconds < other._seconds

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hora):
            return NotImplemented
        return self._seconds == other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __add__(self, other: object) -> Hora:
        if not isinstance(other, Hora):
            return NotImplemented
        total = self._seconds + other._seconds
        if total >= _SECONDS_PER_DAY:
            raise OverflowError("hoy no")
        return Hora.from_seconds(total)

    def __str__(self) -> str:
        hours, rest = divmod(self._seconds, _SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, _SECONDS_PER_MINUTE)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

    def __repr__(self) -> str:
        return f"Hora.parse({str(self)!r})"