"""Composite errors for multierr.

- MultiError: ordered collection of errors raised/returned as one
- append/merge/merge_prefixed: accumulate errors, flattening optionally
- titled/prefixed: per-instance display strategies
- Formatters: list, titled list, prefixed list, global default
- Chain inspection: unwrap, walk, is_error, as_error (depth-first)
- ErrorNode/report: Pydantic snapshot of an error tree
"""

from .chain import as_error, is_error, unwrap, walk
from .combine import PrefixedError, append, combine, merge, merge_prefixed
from .format import (
    NO_ERRORS,
    Formatter,
    formatter_from_settings,
    get_default_formatter,
    list_formatter,
    prefixed_list_formatter,
    reset_default_formatter,
    set_default_formatter,
    titled_list_formatter,
)
from .multi import MultiError, inspect, prefixed, prefixedf, titled, titledf
from .report import ErrorNode, report

__all__ = [
    # Composite
    "MultiError", "inspect", "titled", "titledf", "prefixed", "prefixedf",
    # Combination
    "append", "merge", "merge_prefixed", "combine", "PrefixedError",
    # Formatting
    "Formatter", "NO_ERRORS", "list_formatter", "titled_list_formatter", "prefixed_list_formatter",
    "get_default_formatter", "set_default_formatter", "reset_default_formatter", "formatter_from_settings",
    # Inspection
    "unwrap", "walk", "is_error", "as_error",
    # Snapshot
    "ErrorNode", "report",
]
