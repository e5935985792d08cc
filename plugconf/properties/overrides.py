"""
Process-level overrides: in-process properties set by the application
(the equivalent of JVM system properties) plus read access to the OS
environment.
"""

from __future__ import annotations
import os
import threading
from typing import Dict, Mapping, Optional


class ProcessOverrides:
    def __init__(self, properties: Optional[Mapping[str, str]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self._lock = threading.Lock()
        self._properties: Dict[str, str] = dict(properties or {})
        self._environ = environ

    def get(self, key: str) -> Optional[str]:
        return self._properties.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            updated = dict(self._properties)
            updated[key] = str(value)
            self._properties = updated

    def remove(self, key: str) -> None:
        with self._lock:
            if key in self._properties:
                updated = dict(self._properties)
                del updated[key]
                self._properties = updated

    def clear(self) -> None:
        with self._lock:
            self._properties = {}

    def getenv(self, key: str) -> Optional[str]:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(key)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._properties)


# process-wide instance used by the module-level helpers
system_properties = ProcessOverrides()
