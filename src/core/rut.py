"""RUT chileno: formato, dígito verificador y parseo.

Por qué separar formato y dígito:
- `validate_rut_format` es puramente sintáctico (los dos formatos de entrada).
- `is_valid_rut` suma la verificación Módulo 11; un string puede pasar el
  primero y fallar el segundo.
- Ninguno de los dos lanza: se usan como guardas antes de persistir.
"""

from __future__ import annotations

import logging
import re

from core.domain.checksum import compute_check_digit
from core.domain.errors import InvalidRutError
from core.domain.models import RUT_MAX_BODY, RUT_MIN_BODY, TaxId

logger = logging.getLogger(__name__)

# 12.345.678-5 / 1.234.567-K
_GROUPED_RE = re.compile(r"[0-9]{1,2}\.[0-9]{3}\.[0-9]{3}-[0-9kK]")
# 12345678-5 / 1234567-K
_COMPACT_RE = re.compile(r"[0-9]{7,8}-[0-9kK]")

__all__ = [
    "clean_rut",
    "compute_check_digit",
    "format_rut",
    "is_valid_rut",
    "parse_rut",
    "validate_rut_format",
]


def validate_rut_format(value: object) -> bool:
    """True si `value` tiene forma de RUT (agrupado con puntos o compacto).

    No recalcula el dígito verificador. Nunca lanza: cualquier valor que no sea
    `str` devuelve `False`.
    """

    if not isinstance(value, str):
        return False
    return bool(_GROUPED_RE.fullmatch(value) or _COMPACT_RE.fullmatch(value))


def clean_rut(value: str) -> str:
    """Normaliza a `CUERPO+DV` en mayúsculas, sin puntos, guiones ni espacios."""

    return re.sub(r"[.\-\s]", "", value).upper()


def _split(value: str) -> tuple[int, str]:
    body, symbol = value.replace(".", "").split("-")
    return int(body), symbol.upper()


def is_valid_rut(value: object) -> bool:
    """Formato válido *y* dígito verificador correcto. Nunca lanza."""

    if not validate_rut_format(value):
        return False
    number, symbol = _split(value)  # type: ignore[arg-type]
    return compute_check_digit(number) == symbol


def parse_rut(value: str) -> TaxId:
    """Convierte un RUT en texto a `TaxId`.

    Acepta ambos formatos (`12.345.678-5`, `12345678-5`) con espacios alrededor
    y `k` minúscula. Lanza `InvalidRutError` si el formato o el dígito fallan.
    """

    candidate = value.strip() if isinstance(value, str) else value
    if not validate_rut_format(candidate):
        logger.debug("Rejected RUT %r: unrecognized format", value)
        raise InvalidRutError(value, "expected 12.345.678-5 or 12345678-5")

    number, symbol = _split(candidate)
    expected = compute_check_digit(number)
    if symbol != expected:
        logger.debug("Rejected RUT %r: check digit %s != %s", value, symbol, expected)
        raise InvalidRutError(value, f"check digit should be {expected}")

    return TaxId(number=number, check_symbol=symbol)


def format_rut(number: int, *, dots: bool = False) -> str:
    """Renderiza el RUT completo de `number` calculando su dígito.

    `dots=True` usa la forma agrupada (`12.345.678-5`).
    """

    if not RUT_MIN_BODY <= number <= RUT_MAX_BODY:
        raise ValueError(f"RUT body must have 7 or 8 digits, got {number}")
    return TaxId.from_number(number).formatted(dots=dots)
