"""Contrato de la fuente de azar.

Por qué Protocol:
- Los generadores reciben la entropía como capacidad inyectada.
- Permite sustituirla en tests por una fuente con semilla o guionizada sin
  tocar la lógica de generación.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Capacidades mínimas que necesitan los generadores.

    Reglas de diseño:
    - Todos los rangos son cerrados (`randint(1, 3)` puede devolver 3).
    - Las cadenas son uniformes por posición.
    """

    def randint(self, low: int, high: int) -> int:
        """Entero uniforme en `[low, high]`."""

        ...

    def boolean(self, probability: float = 0.5) -> bool:
        """`True` con la probabilidad indicada."""

        ...

    def uppercase_letters(self, length: int) -> str:
        """`length` letras ASCII mayúsculas."""

        ...

    def digit_string(self, length: int) -> str:
        """`length` dígitos decimales; se permiten ceros a la izquierda."""

        ...

    def choice(self, options: Sequence[T]) -> T:
        """Un elemento uniforme de `options` (no vacía)."""

        ...
