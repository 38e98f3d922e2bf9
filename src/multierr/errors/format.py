"""Formatters rendering a sequence of errors into display text.

A formatter is any callable taking the ordered errors of a composite and
returning a string. Built-in strategies:
- list_formatter: "N errors occurred:" followed by an indented bullet list
- titled_list_formatter: same bullet list under a caller-provided title
- prefixed_list_formatter: one line per error, each starting with a prefix

Formatters never mutate their input and never raise; an empty sequence
renders as NO_ERRORS.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TypeAlias

from pydantic import ValidationError

from ..config import MultierrSettings, get_settings

if TYPE_CHECKING:
    from collections.abc import Sequence

Formatter: TypeAlias = Callable[["Sequence[BaseException]"], str]

NO_ERRORS = "no errors occurred"

logger = logging.getLogger("multierr.format")


def list_formatter(errs: Sequence[BaseException]) -> str:
    """Put each error on its own indented line, titled "N error(s) occurred:"."""
    if not errs:
        return NO_ERRORS
    plural = "error" if len(errs) == 1 else "errors"
    return titled_list_formatter(f"{len(errs)} {plural} occurred:")(errs)


def titled_list_formatter(title: str) -> Formatter:
    """Formatter listing each error as an indented bullet under title.

    Continuation lines of multi-line messages are indented to sit under
    their bullet.
    """
    def fmt(errs: Sequence[BaseException]) -> str:
        if not errs:
            return NO_ERRORS
        lines = [title]
        lines += ["  - " + str(err).replace("\n", "\n    ") for err in errs]
        return "\n".join(lines)
    return fmt


def prefixed_list_formatter(prefix: str) -> Formatter:
    """Formatter putting each error on a new line, prefixed with prefix.

    Continuation lines of multi-line messages are aligned with the first
    character after the prefix.
    """
    indent = "\n" + " " * len(prefix)

    def fmt(errs: Sequence[BaseException]) -> str:
        if not errs:
            return NO_ERRORS
        return "\n".join(prefix + str(err).replace("\n", indent) for err in errs)
    return fmt


def formatter_from_settings(settings: MultierrSettings) -> Formatter:
    """Build the formatter selected by settings."""
    match settings.format:
        case "titled":
            return titled_list_formatter(settings.title or "")
        case "prefixed":
            return prefixed_list_formatter(settings.prefix or "")
        case _:
            return list_formatter


# ═══════════════════════════════════════════════════════════════════════════════
# Process-wide default (not synchronized; set once at start-up)
# ═══════════════════════════════════════════════════════════════════════════════

_default: Formatter | None = None


def get_default_formatter() -> Formatter:
    """Get the global default formatter (built from settings if unset).

    Invalid settings never surface through display: they are logged once and
    the bare list formatter is used until reset_default_formatter() is called.
    """
    global _default
    if _default is None:
        try:
            settings = get_settings()
        except ValidationError as exc:
            logger.warning("invalid multierr settings, using list formatter: %s", exc)
            _default = list_formatter
        else:
            _default = formatter_from_settings(settings)
            logger.debug("default formatter built from settings: %s", settings.format)
    return _default


def set_default_formatter(formatter: Formatter) -> None:
    """Replace the formatter used by composites without their own."""
    global _default
    _default = formatter
    logger.debug("default formatter replaced: %r", formatter)


def reset_default_formatter() -> None:
    """Drop the global default (useful for testing)."""
    global _default
    _default = None
