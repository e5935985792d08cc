"""
Small helpers for interpreting configuration values.
"""

from __future__ import annotations
import os
from typing import Optional

_EMPTY_VALUES = {"false", "0", "null", "n/a"}
_DEFAULT_VALUES = {"true", "default"}

_pid = -1


def is_empty(value: Optional[str]) -> bool:
    """True for None, "" and the switched-off spellings false/0/null/N/A."""
    return not value or value.lower() in _EMPTY_VALUES


def is_not_empty(value: Optional[str]) -> bool:
    return not is_empty(value)


def is_default(value: Optional[str]) -> bool:
    return value is not None and value.lower() in _DEFAULT_VALUES


def get_pid() -> int:
    """Current process id, cached after the first lookup."""
    global _pid
    if _pid < 0:
        _pid = os.getpid()
    return _pid
