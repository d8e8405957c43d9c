from __future__ import annotations

import os
from typing import Sequence, TypeVar

import pytest

from adapters.random_source import PythonRandomSource

T = TypeVar("T")


class ScriptedSource:
    """RandomSource that replays fixed answers and records every call."""

    def __init__(
        self,
        *,
        ints: Sequence[int] = (),
        booleans: Sequence[bool] = (),
        letters: str = "ABCD",
        digits: str = "0123",
    ) -> None:
        self._ints = list(ints)
        self._booleans = list(booleans)
        self._letters = letters
        self._digits = digits
        self.calls: list[tuple] = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append(("randint", low, high))
        return self._ints.pop(0)

    def boolean(self, probability: float = 0.5) -> bool:
        self.calls.append(("boolean", probability))
        return self._booleans.pop(0)

    def uppercase_letters(self, length: int) -> str:
        self.calls.append(("uppercase_letters", length))
        return self._letters[:length]

    def digit_string(self, length: int) -> str:
        self.calls.append(("digit_string", length))
        return self._digits[:length]

    def choice(self, options: Sequence[T]) -> T:
        self.calls.append(("choice", len(options)))
        return options[0]


@pytest.fixture
def seeded_source() -> PythonRandomSource:
    return PythonRandomSource(seed=20240501)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep developer .env files and RUTCHECK_* variables out of the tests."""

    for key in list(os.environ):
        if key.startswith("RUTCHECK_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
