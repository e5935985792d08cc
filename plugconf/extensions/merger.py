"""
Merge logic for requested extension lists + built-in defaults.

A requested list is a comma separated string of extension names with two
reserved spellings:

- ``default``   marks where the built-in defaults are inserted
- ``-name``     removes ``name`` from the result; ``-default`` suppresses all
                defaults
"""

from __future__ import annotations
from typing import Callable, Iterable, List, Optional

from ..constants import COMMA_SPLIT_PATTERN, DEFAULT_KEY, REMOVE_VALUE_PREFIX
from ..logging_setup import get_logger
from .registry import ExtensionRegistry

log = get_logger("plugconf.merger")

REMOVE_DEFAULTS = REMOVE_VALUE_PREFIX + DEFAULT_KEY


def split_names(requested: Optional[str]) -> List[str]:
    """Split a comma separated list, dropping blank entries."""
    if requested is None or not requested.strip():
        return []
    return [part.strip() for part in COMMA_SPLIT_PATTERN.split(requested) if part.strip()]


def merge_values(
    requested: Optional[str],
    defaults: Optional[Iterable[str]],
    extension_exists: Callable[[str], bool],
) -> List[str]:
    """
    Merge a requested extension list with the default extensions.

    Args:
        requested: comma separated extension names (may be None or blank)
        defaults: built-in default names, in priority order
        extension_exists: registry lookup; defaults it rejects are dropped

    Returns:
        Final ordered list of active extension names
    """
    available = [name for name in (defaults or []) if extension_exists(name)]
    names = split_names(requested)

    if REMOVE_DEFAULTS not in names:
        pos = names.index(DEFAULT_KEY) if DEFAULT_KEY in names else -1
        if pos > 0:
            names[pos:pos] = available
        else:
            names[0:0] = available
    names = [name for name in names if name != DEFAULT_KEY]

    # "-foo" cancels itself and "foo"; iterate a snapshot
    for name in list(names):
        if name.startswith(REMOVE_VALUE_PREFIX):
            if name in names:
                names.remove(name)
            positive = name[len(REMOVE_VALUE_PREFIX):]
            if positive in names:
                names.remove(positive)

    log.debug("Merged extensions %r + defaults %r -> %r", requested, available, names)
    return names


class ExtensionListMerger:
    """
    Binds `merge_values` to an extension registry.

    Usage:
        merger = ExtensionListMerger(registry)
        merger.merge("filter", "default,-monitor,trace", ["monitor", "echo"])
    """

    def __init__(self, registry: ExtensionRegistry):
        self.registry = registry

    def merge(
        self,
        extension_type: str,
        requested: Optional[str],
        defaults: Optional[Iterable[str]],
    ) -> List[str]:
        return merge_values(
            requested,
            defaults,
            lambda name: self.registry.has_extension(extension_type, name),
        )
