from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

EXIT_OK = 0
EXIT_USAGE = 2         # bad CLI usage, missing args, etc.
EXIT_RUNTIME = 3       # generic runtime error
EXIT_NOT_FOUND = 4     # environment fact or path unavailable

NOT_FOUND = "NotFound"
INVALID_PATH = "InvalidPath"


class PulseError(Exception):
    """
    Structured, user-facing error for the pulse CLI.

    Args:
        kind: Short category label, e.g. "NotFound". Must be non-empty.
        message: Human-readable detail.
        code: Process exit code to use when this error reaches the CLI.
    """
    def __init__(self, kind: str, message: str, code: int = EXIT_RUNTIME):
        if not kind:
            raise ValueError("error kind must be a non-empty string")
        super().__init__(kind, message)
        object.__setattr__(self, "_kind", str(kind))
        object.__setattr__(self, "_message", str(message))
        object.__setattr__(self, "_code", int(code))

    def __setattr__(self, name, value):
        # traceback bookkeeping still has to work on a raised error
        if name.startswith("__"):
            super().__setattr__(name, value)
            return
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> int:
        return self._code

    def display(self) -> str:
        return f"{self._kind}: {self._message}"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"PulseError(kind={self._kind!r}, message={self._message!r})"

    def __reduce__(self):
        return (type(self), (self._kind, self._message, self._code))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PulseError):
            return NotImplemented
        return (self._kind, self._message) == (other._kind, other._message)

    def __hash__(self) -> int:
        return hash((self._kind, self._message))


def not_found(message: str) -> PulseError:
    return PulseError(NOT_FOUND, message, code=EXIT_NOT_FOUND)


@dataclass(frozen=True)
class Result:
    """Success-or-error outcome of a resolver; exactly one field is set."""
    value: Optional[str] = None
    error: Optional[PulseError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Result needs exactly one of value or error")

    @classmethod
    def success(cls, value: str) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: PulseError) -> "Result":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
