"""Text-to-value parsers for puzzle inputs.

Parsers are small objects with a ``parse(raw)`` method and compose by
nesting::

    Lines(CommaSeparated(int)).parse("1,2\\n3, 4")   # [[1, 2], [3, 4]]

Scalar conversion goes through a pydantic ``TypeAdapter`` when given a
type (lax mode, so ``"42"`` validates as ``42``) or through any plain
callable. Every failure is raised as ``ParseError``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Protocol, runtime_checkable

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

__all__ = [
    "CommaSeparated",
    "Lines",
    "ParseError",
    "Parser",
    "RowsOfChars",
    "TrimAndParse",
    "WhitespaceSeparated",
    "as_parser",
]

_COMMA_OR_SPACE = re.compile(r"[, ]")


class ParseError(ValueError):
    """Raised when raw input cannot be converted."""


@runtime_checkable
class Parser(Protocol):
    def parse(self, raw: str) -> Any: ...


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _convert(target: Any, text: str) -> Any:
    if isinstance(target, type):
        if target is str:
            return text
        try:
            return _adapter(target).validate_python(text)
        except ValidationError as e:
            raise ParseError(
                f"Parsing failed: {text!r} is not a valid {target.__name__}"
            ) from e
    try:
        return target(text)
    except (ValueError, TypeError, KeyError) as e:
        raise ParseError(f"Parsing failed: {text!r}: {e}") from e


class TrimAndParse:
    """Strip surrounding whitespace, then convert the whole input."""

    def __init__(self, target: Any = str) -> None:
        self.target = target

    def parse(self, raw: str) -> Any:
        return _convert(self.target, raw.strip())

    def __repr__(self) -> str:
        return f"TrimAndParse({self.target!r})"


def as_parser(target: Any) -> Parser:
    """Normalise a parser, type or callable into a parser."""
    if isinstance(target, Parser) and not isinstance(target, type):
        return target
    if isinstance(target, type) or callable(target):
        return TrimAndParse(target)
    raise TypeError(f"Cannot build a parser from {target!r}")


class Lines:
    """One item per input line."""

    def __init__(self, item: Any = str) -> None:
        self.item = as_parser(item)

    def parse(self, raw: str) -> list[Any]:
        return [self.item.parse(line) for line in raw.splitlines()]


class CommaSeparated:
    """Items split on commas and spaces; empty parts are dropped."""

    def __init__(self, item: Any = str) -> None:
        self.item = as_parser(item)

    def parse(self, raw: str) -> list[Any]:
        return [
            self.item.parse(part)
            for part in _COMMA_OR_SPACE.split(raw.strip())
            if part
        ]


class WhitespaceSeparated:
    """Items split on runs of whitespace."""

    def __init__(self, item: Any = str) -> None:
        self.item = as_parser(item)

    def parse(self, raw: str) -> list[Any]:
        return [self.item.parse(part) for part in raw.split()]


class RowsOfChars:
    """A grid: one row per line, one converted value per character."""

    def __init__(self, convert: Callable[[str], Any] = str) -> None:
        self.convert = convert

    def parse(self, raw: str) -> list[list[Any]]:
        rows = []
        for lineno, line in enumerate(raw.splitlines(), start=1):
            try:
                rows.append([self.convert(char) for char in line])
            except (ValueError, TypeError, KeyError) as e:
                raise ParseError(f"Parse failed on line {lineno}: {e}") from e
        logger.debug("Parsed %d rows of characters", len(rows))
        return rows
