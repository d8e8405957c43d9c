"""Formatos de patente chilena.

Por qué un Enum:
- Los dos formatos (ABC123 y ABCD12) son disjuntos; cada miembro lleva su
  patrón y su reparto letras/dígitos, y generadores y validadores lo comparten.
"""

from __future__ import annotations

import re
from enum import Enum


class PlateFormat(str, Enum):
    """Formato antiguo (3 letras + 3 dígitos) o nuevo (4 letras + 2 dígitos)."""

    OLD = "old"
    NEW = "new"

    @property
    def pattern(self) -> re.Pattern[str]:
        return _PATTERNS[self]

    @property
    def example(self) -> str:
        return "ABC123" if self is PlateFormat.OLD else "ABCD12"

    @property
    def letters(self) -> int:
        return 3 if self is PlateFormat.OLD else 4

    @property
    def digits(self) -> int:
        return 6 - self.letters

    def matches(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None


# ASCII only: `[A-Z]`/`[0-9]` instead of `\d`, which would accept other scripts.
_PATTERNS: dict[PlateFormat, re.Pattern[str]] = {
    PlateFormat.OLD: re.compile(r"[A-Z]{3}[0-9]{3}"),
    PlateFormat.NEW: re.compile(r"[A-Z]{4}[0-9]{2}"),
}
