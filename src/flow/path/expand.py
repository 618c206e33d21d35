"""Wildcard expansion of path expressions against a concrete document."""

from __future__ import annotations

from typing import Any

from .access import MISSING, step_into
from .steps import WILDCARD, Step, format_path, parse_path


def expand_steps(document: Any, steps: list[Step]) -> list[list[Step]]:
    """Enumerate every concrete step list that ``steps`` reaches in ``document``.

    ``[*]`` steps fan out over the indices that exist right now, in ascending
    order, depth first. Branches that do not resolve contribute nothing.
    """

    results: list[list[Step]] = []
    _expand(document, steps, [], results)
    return results


def _expand(
    value: Any, remaining: list[Step], prefix: list[Step], out: list[list[Step]]
) -> None:
    if not remaining:
        out.append(prefix)
        return

    step, rest = remaining[0], remaining[1:]
    if not step.is_wildcard:
        child = step_into(value, step)
        if child is not MISSING:
            _expand(child, rest, [*prefix, step], out)
        return

    items = step_into(value, Step(key=step.key))
    if not isinstance(items, list):
        return
    for index, item in enumerate(items):
        _expand(item, rest, [*prefix, Step(key=step.key, index=index)], out)


def expand(document: Any, path: str) -> list[str]:
    """Expand ``path`` into concrete path strings.

    Raises ``PathSyntaxError`` for malformed paths; missing data simply
    yields an empty list.
    """

    return [format_path(steps) for steps in expand_steps(document, parse_path(path))]


__all__ = ["WILDCARD", "expand", "expand_steps"]
