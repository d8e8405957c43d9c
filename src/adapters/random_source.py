"""Fuente de azar basada en `random.Random`.

Por qué una instancia propia:
- No comparte estado con el módulo global `random`; dos fuentes con la misma
  semilla producen la misma secuencia.
- Una fuente por hilo si se necesita aislamiento entre hilos.
"""

from __future__ import annotations

import random
import string
from typing import Sequence, TypeVar

from core.config import AppSettings
from core.interfaces.random_source import RandomSource

T = TypeVar("T")


class PythonRandomSource(RandomSource):
    """Implementa `RandomSource` sobre `random.Random`."""

    def __init__(self, seed: int | None = None, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random(seed)

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "PythonRandomSource":
        settings = settings or AppSettings()
        return cls(settings.random_seed)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def boolean(self, probability: float = 0.5) -> bool:
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {probability}")
        return self._rng.random() < probability

    def uppercase_letters(self, length: int) -> str:
        return "".join(self._rng.choices(string.ascii_uppercase, k=length))

    def digit_string(self, length: int) -> str:
        return "".join(self._rng.choices(string.digits, k=length))

    def choice(self, options: Sequence[T]) -> T:
        return self._rng.choice(options)
