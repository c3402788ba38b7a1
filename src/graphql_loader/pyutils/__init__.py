"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .deep_merge import deep_merge
from .settle import Callback, settle

__all__ = ["Callback", "deep_merge", "settle"]
