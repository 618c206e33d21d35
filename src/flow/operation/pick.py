from __future__ import annotations

from typing import Any

from ..path import (
    expand_steps,
    final_key,
    get_at,
    has_wildcard,
    parse_path,
    set_overwrite,
)
from .base import _OperationModel, is_filtered


class Pick(_OperationModel):
    """Extract values at the given paths.

    By default the result is flattened: one path gives the bare value (or a
    list for a wildcard that matches several elements), several paths give a
    mapping keyed by each path's last key. With ``preserve_hierarchy`` the
    values are merged back into their original nesting instead.
    """

    paths: list[str]
    preserve_hierarchy: bool = False

    def describe(self) -> str:
        return "pick(" + ", ".join(self.paths) + ")"

    def apply(self, document: Any) -> Any:
        if is_filtered(document) or not self.paths:
            return document
        if self.preserve_hierarchy:
            return self._apply_with_hierarchy(document)
        if len(self.paths) == 1:
            return self._apply_single(document, self.paths[0])
        return self._apply_multiple(document)

    def _apply_single(self, document: Any, path: str) -> Any:
        steps = parse_path(path)
        expanded = expand_steps(document, steps)

        if has_wildcard(steps):
            if len(expanded) == 1:
                return get_at(document, expanded[0])[0]
            return _collect(document, expanded)

        value, _ = get_at(document, steps)
        return value

    def _apply_multiple(self, document: Any) -> dict[str, Any] | None:
        out: dict[str, Any] = {}
        for path in self.paths:
            steps = parse_path(path)
            key = final_key(steps)

            if has_wildcard(steps):
                values = _collect(document, expand_steps(document, steps))
                if values:
                    out[key] = values
                continue

            value, found = get_at(document, steps)
            if found:
                out[key] = value

        return out or None

    def _apply_with_hierarchy(self, document: Any) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for path in self.paths:
            for steps in expand_steps(document, parse_path(path)):
                value, found = get_at(document, steps)
                if found:
                    set_overwrite(out, steps, value)
        return out


def _collect(document: Any, expanded: list) -> list[Any]:
    values: list[Any] = []
    for steps in expanded:
        value, found = get_at(document, steps)
        if found:
            values.append(value)
    return values
