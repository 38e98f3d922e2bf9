"""Composite exception accumulating several independent failures.

MultiError holds an ordered list of underlying errors plus an optional
formatter. It is built by append/merge (see combine.py), rendered through
its formatter, and unwrapped depth-first (see chain.py).

Examples:
    >>> err = MultiError([ValueError("bad id"), KeyError("name")])
    >>> print(err)
    2 errors occurred:
      - bad id
      - 'name'
    >>> titled(err, "validation failed:") is err
    True
    >>> MultiError().error_or_none() is None
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .format import Formatter, get_default_formatter, prefixed_list_formatter, titled_list_formatter

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class MultiError(Exception):
    """Ordered collection of errors raised or returned as one exception.

    Attributes:
        errors: Underlying errors in insertion order (never contains None)
        formatter: Per-instance display strategy; None uses the global default

    Combination functions mutate and return an existing instance passed as
    their seed, so callers holding a reference observe the appended errors.
    Instances are not safe for concurrent mutation.
    """

    def __init__(self, errors: Iterable[BaseException | None] | None = None, formatter: Formatter | None = None) -> None:
        super().__init__()
        self.errors: list[BaseException] = [e for e in errors or () if e is not None]
        self.formatter = formatter

    def __str__(self) -> str:
        return (self.formatter or get_default_formatter())(self.errors)

    def __repr__(self) -> str:
        return f"MultiError({self.errors!r})"

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def error_or_none(self) -> MultiError | None:
        """Return self if any errors were accumulated, else None.

        Useful at the end of accumulation so the returned value signals
        whether anything failed.
        """
        return self if self.errors else None

    def unwrap(self) -> BaseException | None:
        """First step of the depth-first unwrap chain.

        Repeatedly unwrapping the result visits every (recursively) contained
        error. Errors appended after unwrapping began are not observed.
        """
        if not self.errors:
            return None
        if len(self.errors) == 1:
            return self.errors[0]
        from .chain import _Chain
        return _Chain.start(self.errors)

    def leaves(self) -> Iterator[BaseException]:
        """Yield every non-composite error depth-first, left to right."""
        stack: list[Iterator[BaseException]] = [iter(list(self.errors))]
        while stack:
            err = next(stack[-1], None)
            if err is None:
                stack.pop()
            elif isinstance(err, MultiError):
                stack.append(iter(list(err.errors)))
            else:
                yield err


def titled(err: BaseException | None, title: str) -> MultiError | None:
    """Set a titled list formatter on err, converting it to a MultiError.

    An existing MultiError (even an empty one) is updated in place and
    returned. Returns None if err is None.
    """
    return _with_formatter(err, titled_list_formatter(title))


def titledf(err: BaseException | None, fmt: str, *args: object) -> MultiError | None:
    """Like titled, with a printf-style title."""
    return titled(err, fmt % args if args else fmt)


def prefixed(err: BaseException | None, prefix: str) -> MultiError | None:
    """Set a prefixed list formatter on err, converting it to a MultiError.

    An existing MultiError (even an empty one) is updated in place and
    returned. Returns None if err is None.
    """
    return _with_formatter(err, prefixed_list_formatter(prefix))


def prefixedf(err: BaseException | None, fmt: str, *args: object) -> MultiError | None:
    """Like prefixed, with a printf-style prefix."""
    return prefixed(err, fmt % args if args else fmt)


def _with_formatter(err: BaseException | None, formatter: Formatter) -> MultiError | None:
    if err is None:
        return None
    multi = err if isinstance(err, MultiError) else MultiError([err])
    multi.formatter = formatter
    return multi


def inspect(err: BaseException | None) -> list[BaseException]:
    """List the errors contained in err.

    A MultiError yields a copy of its stored errors, any other error a
    one-element list, and None an empty list.
    """
    if err is None:
        return []
    if isinstance(err, MultiError):
        return list(err.errors)
    return [err]
