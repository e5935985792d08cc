from __future__ import annotations
from typing import Dict, Iterable, Optional, Protocol, Set


class ExtensionRegistry(Protocol):
    """Anything that can answer "is `name` a registered extension of `extension_type`"."""

    def has_extension(self, extension_type: str, name: str) -> bool:
        ...


class StaticExtensionRegistry:
    """
    Lookup table of known extension names per extension type.

    Only records names; it never instantiates anything.
    """

    def __init__(self, extensions: Optional[Dict[str, Iterable[str]]] = None):
        self._extensions: Dict[str, Set[str]] = {}
        for ext_type, names in (extensions or {}).items():
            self.register(ext_type, *names)

    def register(self, extension_type: str, *names: str) -> None:
        self._extensions.setdefault(extension_type, set()).update(names)

    def has_extension(self, extension_type: str, name: str) -> bool:
        return name in self._extensions.get(extension_type, ())

    def names(self, extension_type: str) -> Set[str]:
        return set(self._extensions.get(extension_type, ()))
