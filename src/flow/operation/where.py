from __future__ import annotations

from functools import cached_property
from typing import Any

from ..document import stringify
from ..errors import OperationConfigError, PathSyntaxError
from ..path import MISSING, Step, format_path, parse_path, resolve
from .base import FILTERED, _OperationModel


class Condition(_OperationModel):
    path: str
    expected: str

    @cached_property
    def steps(self) -> list[Step]:
        return parse_path(self.path)

    def matches(self, document: Any) -> bool:
        value = resolve(document, self.steps)
        if value is MISSING:
            return False
        return stringify(value) == self.expected


class Where(_OperationModel):
    """Keep documents that satisfy every condition; drop the rest.

    Values are compared as text, so ``age=30`` matches both ``30`` and
    ``"30"``.
    """

    conditions: list[Condition] = []

    @classmethod
    def from_pairs(cls, pairs: list[str] | tuple[str, ...]) -> Where:
        conditions: list[Condition] = []
        for pair in pairs:
            key, separator, value = pair.partition("=")
            if not separator:
                raise OperationConfigError(
                    f"invalid where condition {pair!r}: must be in format key=value"
                )
            key, value = key.strip(), value.strip()
            if not key:
                raise OperationConfigError(
                    f"invalid where condition {pair!r}: key cannot be empty"
                )
            try:
                parse_path(key)
            except PathSyntaxError as exc:
                raise OperationConfigError(
                    f"invalid where condition {pair!r}: {exc}"
                ) from exc
            conditions.append(Condition(path=key, expected=value))
        return cls(conditions=conditions)

    def describe(self) -> str:
        if not self.conditions:
            return "where: (no conditions)"
        parts = [f"{format_path(c.steps)}={c.expected}" for c in self.conditions]
        return "where: " + " AND ".join(parts)

    def apply(self, document: Any) -> Any:
        for condition in self.conditions:
            if not condition.matches(document):
                return FILTERED
        return document
