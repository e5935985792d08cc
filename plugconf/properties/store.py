"""
Lazily loaded, replaceable key/value store.

The current mapping is an immutable view that is swapped as a whole on every
change, so readers only ever see a complete mapping and never take the lock
once the store is loaded.
"""

from __future__ import annotations
import threading
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from ..logging_setup import get_logger

log = get_logger("plugconf.properties.store")

Loader = Callable[[], Mapping[str, str]]


def _freeze(values: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType({str(k): str(v) for k, v in values.items()})


class PropertyStore:
    def __init__(self, loader: Optional[Loader] = None):
        self._loader = loader
        self._lock = threading.Lock()
        self._properties: Optional[Mapping[str, str]] = None

    @property
    def loaded(self) -> bool:
        return self._properties is not None

    def get_properties(self) -> Mapping[str, str]:
        """Current mapping; the first call runs the loader exactly once."""
        props = self._properties
        if props is None:
            with self._lock:
                props = self._properties
                if props is None:
                    props = _freeze(self._loader() if self._loader is not None else {})
                    log.debug("Property store loaded with %d key(s)", len(props))
                    self._properties = props
        return props

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.get_properties().get(key, default)

    def add_properties(self, properties: Optional[Mapping[str, str]]) -> None:
        """Merge `properties` into the store, overwriting existing keys."""
        if properties is None:
            return
        current = self.get_properties()
        with self._lock:
            merged: Dict[str, str] = dict(self._properties if self._properties is not None else current)
            merged.update(properties)
            self._properties = _freeze(merged)

    def set_properties(self, properties: Optional[Mapping[str, str]]) -> None:
        """Replace the store wholesale; the loader will not run afterwards."""
        if properties is None:
            return
        frozen = _freeze(properties)
        with self._lock:
            self._properties = frozen

    def reset(self) -> None:
        """Drop the current mapping so the next access loads again."""
        with self._lock:
            self._properties = None
