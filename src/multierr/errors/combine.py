"""Append/merge errors into a MultiError.

All entry points ignore None and empty composites, and return None when
nothing was accumulated:

    >>> append(None, None, MultiError()) is None
    True
    >>> errs = [ValueError(f"row {i}") if i % 2 else None for i in range(4)]
    >>> len(append(None, *errs))
    2

When the seed is already a MultiError it is reused: its errors are
extended in place and its formatter is left untouched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .multi import MultiError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("multierr.combine")


class PrefixedError(Exception):
    """Error displayed as prefix + str(err), unwrapping to err."""

    __slots__ = ("prefix", "err")

    def __init__(self, prefix: str, err: BaseException) -> None:
        super().__init__(prefix, err)
        self.prefix = prefix
        self.err = err

    def __str__(self) -> str:
        return f"{self.prefix}{self.err}"

    def unwrap(self) -> BaseException:
        return self.err


def append(err: BaseException | None, *errs: BaseException | None) -> MultiError | None:
    """Combine all errors into a single MultiError.

    Composites in errs are kept as single nested elements.
    """
    return combine(False, err, "", errs)


def merge(err: BaseException | None, *errs: BaseException | None) -> MultiError | None:
    """Combine all errors into a single MultiError, flattening composites in errs."""
    return combine(True, err, "", errs)


def merge_prefixed(err: BaseException | None, prefix: str, *errs: BaseException | None) -> MultiError | None:
    """Like merge, wrapping every added error (flattened ones included) in PrefixedError.

    The seed's own errors are not prefixed.
    """
    return combine(True, err, prefix, errs)


def combine(
    flatten: bool,
    err: BaseException | None,
    prefix: str,
    errs: Iterable[BaseException | None],
) -> MultiError | None:
    """Accumulate errs into err (reused if it is a MultiError)."""
    if isinstance(err, MultiError):
        result = err
        logger.debug("reusing accumulator with %d errors", len(result.errors))
    else:
        result = MultiError()
        if err is not None:
            result.errors.append(err)

    wrap = (lambda e: PrefixedError(prefix, e)) if prefix else (lambda e: e)
    for e in errs:
        if e is None:
            continue
        if isinstance(e, MultiError):
            if not e.errors:
                continue
            if flatten:
                result.errors.extend([wrap(x) for x in e.errors])
                continue
        result.errors.append(wrap(e))

    return result if result.errors else None
