"""Entry point de desarrollo (sin instalar el paquete).

Equivale al script `rutcheck` declarado en `pyproject.toml`:
- `python -m main check-digit 12345678` == `rutcheck check-digit 12345678`

Agrega `src/` al `sys.path` para que `cli` y `core` se importen sin
`pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
