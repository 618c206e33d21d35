"""Parsing of dotted path expressions into structural steps."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

from ..errors import (
    EmptyIndexError,
    EmptyPathError,
    InvalidIndexError,
    InvalidSegmentError,
)


class Wildcard:
    """Marker for a ``[*]`` index."""

    _instance: Wildcard | None = None

    def __new__(cls) -> Wildcard:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "WILDCARD"


WILDCARD: Wildcard = Wildcard()

Index: TypeAlias = int | Wildcard | None

_INDEX_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Step:
    key: str
    index: Index = None

    @property
    def is_wildcard(self) -> bool:
        return self.index is WILDCARD

    def __str__(self) -> str:
        if self.index is None:
            return self.key
        if self.index is WILDCARD:
            return f"{self.key}[*]"
        return f"{self.key}[{self.index}]"


def parse_path(path: str) -> list[Step]:
    """Parse ``path`` into a list of steps.

    Accepted segment shapes are ``key``, ``key[<digits>]`` and ``key[*]``,
    joined with ``.``.
    """

    if not path:
        raise EmptyPathError(path)

    steps: list[Step] = []
    for segment in path.split("."):
        open_at = segment.find("[")
        if open_at < 0:
            if not segment:
                raise InvalidSegmentError(path, segment)
            steps.append(Step(key=segment))
            continue

        if open_at == 0 or not segment.endswith("]"):
            raise InvalidSegmentError(path, segment)

        body = segment[open_at + 1 : -1]
        if not body:
            raise EmptyIndexError(path, segment)
        if body == "*":
            steps.append(Step(key=segment[:open_at], index=WILDCARD))
            continue
        if not _INDEX_RE.fullmatch(body):
            raise InvalidIndexError(path, segment)
        steps.append(Step(key=segment[:open_at], index=int(body)))

    return steps


def format_path(steps: list[Step]) -> str:
    return ".".join(str(step) for step in steps)


def has_wildcard(steps: list[Step]) -> bool:
    return any(step.is_wildcard for step in steps)


def final_key(steps: list[Step]) -> str:
    """Return the key of the last step; ``items[*].name`` gives ``name``."""

    return steps[-1].key if steps else ""


__all__ = [
    "WILDCARD",
    "Index",
    "Step",
    "Wildcard",
    "final_key",
    "format_path",
    "has_wildcard",
    "parse_path",
]
