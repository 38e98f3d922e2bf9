"""multierr - accumulate independent failures into one composite error.

Collects every failure of a batch instead of stopping at the first one,
renders them as a readable list, and lets single-cause inspection
(unwrap/is_error/as_error) see every contained error depth-first.

Quick Start:
    >>> from multierr import append, titled
    >>>
    >>> def validate(rows: list[dict]) -> None:
    ...     err = None
    ...     for i, row in enumerate(rows):
    ...         if "id" not in row:
    ...             err = append(err, ValueError(f"row {i}: missing id"))
    ...     if err is not None:
    ...         raise titled(err, "invalid rows:")
    >>>
    >>> validate([{"id": 1}, {}, {}])
    Traceback (most recent call last):
    ...
    multierr.errors.multi.MultiError: invalid rows:
      - row 1: missing id
      - row 2: missing id

Flattening and Prefixing:
    >>> from multierr import merge, merge_prefixed
    >>> inner = append(None, KeyError("a"), KeyError("b"))
    >>> len(merge(None, inner, ValueError("c")))
    3
    >>> print(merge_prefixed(None, "users: ", ValueError("empty name")))
    1 error occurred:
      - users: empty name

Inspection:
    >>> from multierr import as_error, is_error
    >>> needle = LookupError("missing")
    >>> err = append(None, ValueError("x"), append(None, needle))
    >>> is_error(err, needle), as_error(err, LookupError) is needle
    (True, True)

Configuration (environment):
    MULTIERR_FORMAT=list|titled|prefixed
    MULTIERR_TITLE=...    (titled)
    MULTIERR_PREFIX=...   (prefixed)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import MultierrSettings, clear_settings_cache, get_settings
from .errors import (
    NO_ERRORS,
    ErrorNode,
    Formatter,
    MultiError,
    PrefixedError,
    append,
    as_error,
    combine,
    formatter_from_settings,
    get_default_formatter,
    inspect,
    is_error,
    list_formatter,
    merge,
    merge_prefixed,
    prefixed,
    prefixed_list_formatter,
    prefixedf,
    report,
    reset_default_formatter,
    set_default_formatter,
    titled,
    titled_list_formatter,
    titledf,
    unwrap,
    walk,
)

__all__ = [
    "__version__",
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
    # Configuration
    "MultierrSettings", "get_settings", "clear_settings_cache",
]
