import logging

import pytest

import plugconf.properties.resolver as resolver_mod
from plugconf.properties import system_properties

ENV_KEYS = [
    "plugconf.properties.file",
    "PLUGCONF_PROPERTIES_FILE",
    "PLUGCONF_SEARCH_PATH",
    "PLUGCONF_MULTI_FILE",
]


@pytest.fixture(autouse=True)
def clean_process_state(monkeypatch):
    """Isolate tests from the process-wide overrides, resolver and environment."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    system_properties.clear()
    resolver_mod._default_resolver = None
    yield
    system_properties.clear()
    resolver_mod._default_resolver = None
    # handlers installed by cli.main() point at captured streams
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_plugconf_handler", False):
            root.removeHandler(h)
