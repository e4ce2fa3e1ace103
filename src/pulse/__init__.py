from __future__ import annotations

from .errors import PulseError, Result, NOT_FOUND
from .env import get_cwd, get_home, resolve_cwd, resolve_home, normalize_path

# Resolve package version from installed metadata when available.
# Falls back to a dev/local version when running from source.
try:
    from importlib.metadata import version, PackageNotFoundError
    __version__ = version("pulse-cli")
except PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "PulseError",
    "Result",
    "NOT_FOUND",
    "get_cwd",
    "get_home",
    "resolve_cwd",
    "resolve_home",
    "normalize_path",
    "__version__",
]
