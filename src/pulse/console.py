from __future__ import annotations

import sys
from typing import Any, TextIO


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _write(stream: TextIO, args: tuple, end: str) -> None:
    stream.write(" ".join(_render(a) for a in args) + end)
    stream.flush()


def println(*args: Any) -> None:
    _write(sys.stdout, args, "\n")


def eprintln(*args: Any) -> None:
    _write(sys.stderr, args, "\n")


def print_(*args: Any) -> None:
    # sys.stdout is looked up per call so redirect_stdout() is honoured
    _write(sys.stdout, args, "")


def eprint(*args: Any) -> None:
    _write(sys.stderr, args, "")
