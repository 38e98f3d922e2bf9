"""Depth-first unwrap chain and single-cause inspection helpers.

Python exceptions carry one explicit cause (__cause__). These helpers walk
that single-cause chain, and additionally honour three duck-typed hooks an
exception may define:
- unwrap() -> BaseException | None: next error in the chain
- matches(target) -> bool: extra identity test for is_error
- as_type(cls) -> BaseException | None: extra type test for as_error

MultiError.unwrap() returns a _Chain, which presents a tree of nested
composites as a flat sequence of leaves:

    >>> inner = MultiError([KeyError("c1")])
    >>> outer = MultiError([ValueError("a1"), inner, ValueError("a2")])
    >>> [str(e) for e in walk(outer)][1:]
    ['a1', "'c1'", 'a2']
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias, TypeVar

from .multi import MultiError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

E = TypeVar("E", bound=BaseException)

# (errors, index, parent): cursor into one composite's (copied) error list.
# Frames are never mutated, so every _Chain keeps its own position.
_Frame: TypeAlias = "tuple[list[BaseException], int, _Frame | None]"


def _settle(frame: _Frame | None) -> _Frame | None:
    """Move frame to the next leaf, popping exhausted frames and entering composites."""
    while frame is not None:
        errs, i, parent = frame
        if i >= len(errs):
            frame = None if parent is None else (parent[0], parent[1] + 1, parent[2])
        elif isinstance(errs[i], MultiError):
            frame = (list(errs[i].errors), 0, frame)
        else:
            return frame
    return None


class _Chain(Exception):
    """Position in a depth-first walk; the error under the cursor is current.

    Each unwrap() moves to the next leaf of the tree left to right in
    constant amortized time; composites are entered by pushing a frame.
    """

    __slots__ = ("_frame",)

    def __init__(self, frame: _Frame) -> None:
        super().__init__()
        self._frame = frame

    @classmethod
    def start(cls, errors: Sequence[BaseException]) -> _Chain | None:
        """Begin a walk over a copy of errors (later appends are not observed)."""
        frame = _settle((list(errors), 0, None))
        return cls(frame) if frame is not None else None

    @property
    def current(self) -> BaseException:
        errs, i, _ = self._frame
        return errs[i]

    def __str__(self) -> str:
        return str(self.current)

    def __repr__(self) -> str:
        return f"_Chain(current={self.current!r})"

    def unwrap(self) -> _Chain | None:
        errs, i, parent = self._frame
        frame = _settle((errs, i + 1, parent))
        return _Chain(frame) if frame is not None else None

    def matches(self, target: BaseException) -> bool:
        return is_error(self.current, target)

    def as_type(self, cls: type[E]) -> E | None:
        return as_error(self.current, cls)


# ═══════════════════════════════════════════════════════════════════════════════
# Inspection
# ═══════════════════════════════════════════════════════════════════════════════


def unwrap(err: BaseException | None) -> BaseException | None:
    """Next error in err's chain: its unwrap() hook, else its __cause__."""
    if err is None:
        return None
    hook = getattr(err, "unwrap", None)
    if callable(hook):
        return hook()
    return err.__cause__


def walk(err: BaseException | None) -> Iterator[BaseException]:
    """Yield err and every error reached by repeatedly unwrapping it."""
    while err is not None:
        yield err
        err = unwrap(err)


def is_error(err: BaseException | None, target: BaseException) -> bool:
    """Whether any error in err's chain is (or equals) target.

    Errors exposing a matches() hook are asked as well, which is how a
    _Chain tests its current leaf together with that leaf's own causes.
    """
    for e in walk(err):
        if e is target or e == target:
            return True
        hook = getattr(e, "matches", None)
        if callable(hook) and hook(target):
            return True
    return False


def as_error(err: BaseException | None, cls: type[E]) -> E | None:
    """First error in err's chain that is an instance of cls, else None."""
    for e in walk(err):
        if isinstance(e, cls):
            return e
        hook = getattr(e, "as_type", None)
        if callable(hook) and (found := hook(cls)) is not None:
            return found
    return None
