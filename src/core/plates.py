"""Patentes chilenas: validación estricta, clasificación y normalización.

Reglas:
- La validación es exacta: 6 caracteres, mayúsculas ASCII, sin separadores.
- `normalize_plate` es un paso explícito previo (p.ej. texto de OCR o de un
  formulario); la validación nunca normaliza por su cuenta.
"""

from __future__ import annotations

import re

from core.domain.models import PlateCode
from core.domain.plate_format import PlateFormat

# Separadores habituales en patentes impresas: "AB·CD·12", "ABC-123", "AB CD 12".
_SEPARATORS_RE = re.compile(r"[\s.\-·]")

__all__ = [
    "PlateFormat",
    "classify_plate",
    "normalize_plate",
    "parse_plate",
    "validate_license_plate_format",
]


def classify_plate(value: object) -> PlateFormat | None:
    """Devuelve el formato de la patente o `None` si no calza con ninguno."""

    if not isinstance(value, str):
        return None
    for fmt in PlateFormat:
        if fmt.matches(value):
            return fmt
    return None


def validate_license_plate_format(value: object) -> bool:
    """True si `value` es exactamente `AAA999` o `AAAA99`. Nunca lanza."""

    return classify_plate(value) is not None


def normalize_plate(value: str | None) -> str:
    """Mayúsculas y sin separadores. No valida el resultado."""

    if not value:
        return ""
    return _SEPARATORS_RE.sub("", value).upper()


def parse_plate(value: str, *, normalize: bool = False) -> PlateCode:
    """Construye un `PlateCode`; lanza `InvalidPlateError` si no es válida."""

    candidate = normalize_plate(value) if normalize else value
    return PlateCode.parse(candidate)
