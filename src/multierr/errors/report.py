"""Structured snapshot of an error tree for logs and JSON output.

Uses Pydantic frozen models so a report can be dumped, compared and hashed.

    >>> node = report(MultiError([ValueError("bad")]))
    >>> node.leaf_count
    1
    >>> node.children[0].message
    'bad'
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .combine import PrefixedError
from .multi import MultiError


class ErrorNode(BaseModel):
    """One error of a tree: its type, display text and contained errors."""

    model_config = ConfigDict(
        frozen=True, extra="forbid", revalidate_instances="never",
        json_schema_extra={"title": "Error Node", "examples": [{"type": "ValueError", "message": "bad id", "children": []}]},
    )

    type: Annotated[str, Field(min_length=1)]
    message: str
    composite: bool = False
    children: tuple[ErrorNode, ...] = ()

    @computed_field
    @property
    def leaf_count(self) -> int:
        """Number of non-composite errors in this subtree."""
        if self.composite:
            return sum(c.leaf_count for c in self.children)
        return 1


def report(err: BaseException | None) -> ErrorNode | None:
    """Snapshot err as an ErrorNode tree (None for None).

    A PrefixedError reports the error it wraps as its only child.
    """
    return None if err is None else _build(err)


def _build(err: BaseException) -> ErrorNode:
    if isinstance(err, MultiError):
        children = tuple(_build(e) for e in err.errors)
    elif isinstance(err, PrefixedError):
        children = (_build(err.err),)
    else:
        children = ()
    return ErrorNode.model_construct(
        type=type(err).__name__,
        message=str(err),
        composite=isinstance(err, MultiError),
        children=children,
    )
