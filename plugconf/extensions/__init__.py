"""
Extension list handling: merge user-requested extension names with
built-in defaults.
"""

from .merger import ExtensionListMerger, merge_values, split_names
from .registry import ExtensionRegistry, StaticExtensionRegistry

__all__ = [
    "ExtensionListMerger",
    "merge_values",
    "split_names",
    "ExtensionRegistry",
    "StaticExtensionRegistry",
]
