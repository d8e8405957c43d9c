"""Dígito verificador del RUT (Módulo 11).

Por qué en el dominio:
- Es una función pura sin azar ni I/O; los modelos la usan para validar su
  invariante y los generadores la usan para construir RUTs correctos.
"""

from __future__ import annotations

CHECK_SYMBOLS = frozenset("0123456789K")

_FIRST_WEIGHT = 2
_LAST_WEIGHT = 7


def compute_check_digit(number: int) -> str:
    """Calcula el dígito verificador de un cuerpo de RUT.

    Se recorren los dígitos de derecha a izquierda multiplicando por los pesos
    2, 3, 4, 5, 6, 7, 2, 3, ... y se aplica `11 - (suma % 11)`:
    11 se escribe `0`, 10 se escribe `K`, el resto es el propio número.

    El contrato cubre enteros positivos de 7 u 8 dígitos; el llamador valida
    rango y signo antes de invocar.
    """

    total = 0
    weight = _FIRST_WEIGHT
    for char in reversed(str(number)):
        total += int(char) * weight
        weight = _FIRST_WEIGHT if weight == _LAST_WEIGHT else weight + 1

    raw = 11 - (total % 11)
    if raw == 11:
        return "0"
    if raw == 10:
        return "K"
    return str(raw)
