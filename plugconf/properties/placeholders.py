from __future__ import annotations
import re
from typing import Mapping, Optional

from .overrides import ProcessOverrides, system_properties

VARIABLE_PATTERN = re.compile(r"\$\s*\{?\s*([._0-9a-zA-Z]+)\s*\}?")


def replace_property(
    expression: Optional[str],
    params: Optional[Mapping[str, str]] = None,
    overrides: Optional[ProcessOverrides] = None,
) -> Optional[str]:
    """
    Substitute ``${name}`` / ``$name`` tokens in `expression`.

    Each token resolves to the process override for ``name``, else
    ``params[name]``, else "". Substituted values are not scanned again.
    """
    if not expression or "$" not in expression:
        return expression
    if overrides is None:
        overrides = system_properties

    def _lookup(match: re.Match) -> str:
        key = match.group(1)
        value = overrides.get(key)
        if value is None and params is not None:
            value = params.get(key)
        return "" if value is None else value

    return VARIABLE_PATTERN.sub(_lookup, expression)
