from __future__ import annotations
import threading
from typing import Dict, Mapping, Optional
from pydantic import ValidationError

from ..constants import DEFAULT_PROPERTIES, PROPERTIES_KEY
from ..logging_setup import get_logger
from ..settings import Settings
from .loader import PropertiesLoader
from .overrides import ProcessOverrides, system_properties
from .placeholders import replace_property
from .sources import ResourceLocator, SearchPathLocator
from .store import PropertyStore

log = get_logger("plugconf.properties.resolver")


class PropertyResolver:
    """
    Resolves configuration keys against process overrides and a lazily
    loaded property store.

    Lookup order for `get`:
        1. non-empty process override → returned as is
        2. store value (or `default`) → placeholders substituted
    """

    def __init__(
        self,
        store: Optional[PropertyStore] = None,
        overrides: Optional[ProcessOverrides] = None,
        settings: Optional[Settings] = None,
        locator: Optional[ResourceLocator] = None,
    ):
        self.overrides = overrides if overrides is not None else system_properties
        self._settings = settings
        self._locator = locator
        self.store = store if store is not None else PropertyStore(self._load_default)

    @property
    def settings(self) -> Settings:
        # read the environment as late as possible
        if self._settings is None:
            try:
                self._settings = Settings()
            except ValidationError as e:
                log.warning("Invalid plugconf settings in environment, using defaults: %s", e, exc_info=e)
                self._settings = Settings.model_construct()
        return self._settings

    def properties_path(self) -> str:
        path = self.overrides.get(PROPERTIES_KEY)
        if not path:
            path = self.overrides.getenv(PROPERTIES_KEY)
        if not path:
            path = self.settings.properties_file
        return path or DEFAULT_PROPERTIES

    def _load_default(self) -> Dict[str, str]:
        locator = self._locator
        if locator is None:
            locator = SearchPathLocator.from_string(self.settings.search_path)
        path = self.properties_path()
        log.debug("Loading properties from %s (multi_file=%s)", path, self.settings.allow_multi_file)
        return PropertiesLoader(locator).load(
            path,
            allow_multi_file=self.settings.allow_multi_file,
            allow_empty_file=True,
        )

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self.overrides.get(key)
        if value:
            return value
        properties = self.store.get_properties()
        return replace_property(properties.get(key, default), properties, self.overrides)

    def resolve(self, expression: Optional[str], params: Optional[Mapping[str, str]] = None) -> Optional[str]:
        return replace_property(expression, params, self.overrides)

    def get_properties(self) -> Mapping[str, str]:
        return self.store.get_properties()

    def add_properties(self, properties: Optional[Mapping[str, str]]) -> None:
        self.store.add_properties(properties)

    def set_properties(self, properties: Optional[Mapping[str, str]]) -> None:
        self.store.set_properties(properties)


_default_lock = threading.Lock()
_default_resolver: Optional[PropertyResolver] = None


def default_resolver() -> PropertyResolver:
    global _default_resolver
    if _default_resolver is None:
        with _default_lock:
            if _default_resolver is None:
                _default_resolver = PropertyResolver()
    return _default_resolver


def get_property(key: str, default: Optional[str] = None) -> Optional[str]:
    return default_resolver().get(key, default)


def get_properties() -> Mapping[str, str]:
    return default_resolver().get_properties()


def add_properties(properties: Optional[Mapping[str, str]]) -> None:
    default_resolver().add_properties(properties)


def set_properties(properties: Optional[Mapping[str, str]]) -> None:
    default_resolver().set_properties(properties)
