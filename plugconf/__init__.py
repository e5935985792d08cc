"""
plugconf package
----------------
Extension-list merging and layered property resolution for pluggable
component systems. Contains modules for merging requested extension lists
with built-in defaults, loading ``.properties`` sources, placeholder
substitution, logging, and a small CLI / REST surface.
"""

__version__ = "0.3.0"

from .values import get_pid, is_default, is_empty, is_not_empty

__all__ = ["get_pid", "is_default", "is_empty", "is_not_empty", "__version__"]
