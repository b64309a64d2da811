"""Shared utilities for specreport: debug logging."""

import os
import sys

_DEBUG = bool(os.environ.get("SPECREPORT_DEBUG", ""))


def debug(label: str, msg: str) -> None:
    """Print a debug message to stderr when SPECREPORT_DEBUG is set."""
    if _DEBUG:
        print(f"[specreport] {label}: {msg}", file=sys.stderr)


def is_debug() -> bool:
    return _DEBUG
