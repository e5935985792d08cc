"""
Layered property resolution.

Process-wide helpers (`get_property`, `get_properties`, `add_properties`,
`set_properties`) share one default `PropertyResolver`; build your own
`PropertyResolver` / `PropertyStore` for isolated instances.
"""

from .errors import PropertiesFormatError, SourceReadError
from .loader import PropertiesLoader, load_properties
from .overrides import ProcessOverrides, system_properties
from .parser import dump_properties, load_properties_stream, parse_properties
from .placeholders import VARIABLE_PATTERN, replace_property
from .resolver import (
    PropertyResolver,
    add_properties,
    default_resolver,
    get_properties,
    get_property,
    set_properties,
)
from .sources import LoadOutcome, PropertySource, ResourceLocator, SearchPathLocator, read_source
from .store import PropertyStore

__all__ = [
    "PropertiesFormatError",
    "SourceReadError",
    "PropertiesLoader",
    "load_properties",
    "ProcessOverrides",
    "system_properties",
    "dump_properties",
    "load_properties_stream",
    "parse_properties",
    "VARIABLE_PATTERN",
    "replace_property",
    "PropertyResolver",
    "add_properties",
    "default_resolver",
    "get_properties",
    "get_property",
    "set_properties",
    "LoadOutcome",
    "PropertySource",
    "ResourceLocator",
    "SearchPathLocator",
    "read_source",
    "PropertyStore",
]
