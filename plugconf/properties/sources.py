"""
Property sources and the lookup that discovers them.

A `ResourceLocator` turns a logical resource name (``plugconf.properties``,
``conf/app.properties``) into zero or more readable sources. The default
`SearchPathLocator` checks an ordered list of directories, first hit first.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Callable, Dict, List, Optional, Protocol, Sequence

from ..constants import DEFAULT_ENCODING, SEARCH_PATH_ENV_KEY
from ..logging_setup import get_logger
from .errors import SourceReadError
from .parser import load_properties_stream

log = get_logger("plugconf.properties.sources")


@dataclass(frozen=True)
class PropertySource:
    location: str
    opener: Callable[[], BinaryIO] = field(compare=False, repr=False)

    def open(self) -> BinaryIO:
        return self.opener()

    @classmethod
    def from_path(cls, path: Path) -> "PropertySource":
        path = Path(path)
        return cls(location=str(path), opener=lambda: open(path, "rb"))


class ResourceLocator(Protocol):
    def find(self, name: str) -> List[PropertySource]:
        ...


class SearchPathLocator:
    """Looks `name` up relative to each directory of the search path."""

    def __init__(self, directories: Optional[Sequence[Path]] = None):
        if directories is None:
            directories = [Path.cwd()]
        self.directories = [Path(d) for d in directories]

    @classmethod
    def from_string(cls, search_path: Optional[str]) -> "SearchPathLocator":
        """Build from an ``os.pathsep`` separated string; blank → cwd."""
        if search_path is None:
            search_path = os.environ.get(SEARCH_PATH_ENV_KEY, "")
        dirs = [Path(p) for p in search_path.split(os.pathsep) if p.strip()]
        return cls(dirs or None)

    def find(self, name: str) -> List[PropertySource]:
        found: List[PropertySource] = []
        for directory in self.directories:
            candidate = directory / name
            if candidate.is_file():
                found.append(PropertySource.from_path(candidate))
        return found


@dataclass
class LoadOutcome:
    """Result of reading one source: either properties or the error."""
    location: str
    properties: Dict[str, str] = field(default_factory=dict)
    error: Optional[SourceReadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_source(source: PropertySource, encoding: str = DEFAULT_ENCODING) -> LoadOutcome:
    """Read and parse one source. Any failure ends up in the outcome."""
    try:
        with source.open() as stream:
            props = load_properties_stream(stream, encoding=encoding)
    except Exception as e:
        return LoadOutcome(location=source.location, error=SourceReadError(source.location, e))
    return LoadOutcome(location=source.location, properties=props)
