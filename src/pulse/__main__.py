from __future__ import annotations

import sys
from typing import Optional

from .cli import run_cli


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for ``python -m pulse`` and the ``pulse`` console script."""
    return run_cli(argv)


if __name__ == "__main__":
    sys.exit(main())
