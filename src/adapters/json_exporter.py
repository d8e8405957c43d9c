"""Exportación JSON del lote de datos de prueba.

Por qué JSON:
- Los fixtures generados se cargan luego como seeds del backend o de tests.
- Formato estable (claves ordenadas) para poder versionarlos y compararlos.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.services.test_data import FixtureBatch


def export_batch_json(*, batch: FixtureBatch, output_path: Path) -> Path:
    """Exporta `FixtureBatch` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = batch.to_dict()
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
