"""
Loading of property stores from one or more discovered sources.

Rules:
- absolute file name   → read exactly that file
- relative file name   → ask the locator for all matches
    - no match                  → empty store (warning if allow_empty_file)
    - allow_multi_file=False    → first match only, warning if more were found
    - allow_multi_file=True     → all matches, later sources win on conflicts
- unreadable source    → warning with location and cause, source is skipped
"""

from __future__ import annotations
import os
from typing import Dict, List, Optional

from ..constants import DEFAULT_ENCODING
from ..logging_setup import get_logger
from .sources import LoadOutcome, PropertySource, ResourceLocator, SearchPathLocator, read_source

log = get_logger("plugconf.properties.loader")


class PropertiesLoader:
    def __init__(self, locator: Optional[ResourceLocator] = None, encoding: str = DEFAULT_ENCODING):
        self.locator = locator if locator is not None else SearchPathLocator.from_string(None)
        self.encoding = encoding

    def _read(self, source: PropertySource) -> LoadOutcome:
        outcome = read_source(source, encoding=self.encoding)
        if not outcome.ok:
            log.warning("Failed to load %s (ignoring this file): %s",
                        outcome.location, outcome.error.cause, exc_info=outcome.error.cause)
        return outcome

    def _find(self, file_name: str) -> List[PropertySource]:
        try:
            return list(self.locator.find(file_name))
        except Exception as e:
            log.warning("Failed to look up %s: %s", file_name, e, exc_info=e)
            return []

    def load(self, file_name: str, allow_multi_file: bool = False,
             allow_empty_file: bool = False) -> Dict[str, str]:
        """
        Load `file_name` into a fresh dict. Never raises for missing or
        broken sources; the worst case is an empty dict plus log output.
        """
        if os.path.isabs(file_name):
            return self._read(PropertySource.from_path(file_name)).properties

        sources = self._find(file_name)
        if not sources:
            if allow_empty_file:
                log.warning("No %s found on the search path.", file_name)
            return {}

        if not allow_multi_file:
            if len(sources) > 1:
                log.warning("Only 1 %s file is expected, but %d found: %s (using the first)",
                            file_name, len(sources), [s.location for s in sources])
            return self._read(sources[0]).properties

        log.info("Loading %s properties file from %s", file_name, [s.location for s in sources])
        merged: Dict[str, str] = {}
        for source in sources:
            outcome = self._read(source)
            if outcome.ok:
                merged.update(outcome.properties)
        return merged


def load_properties(file_name: str, allow_multi_file: bool = False,
                    allow_empty_file: bool = False,
                    locator: Optional[ResourceLocator] = None) -> Dict[str, str]:
    return PropertiesLoader(locator).load(file_name, allow_multi_file, allow_empty_file)
