"""Navigation and mutation of nested mapping/sequence trees by concrete steps."""

from __future__ import annotations

from typing import Any

from ..document import Document
from .steps import WILDCARD, Step


class _PathMissing:
    """Sentinel for unresolvable paths."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: _PathMissing = _PathMissing()


def step_into(value: Any, step: Step) -> Any:
    """Resolve a single step against ``value``, or return ``MISSING``.

    The keyed child must exist in a mapping; when the step carries an index
    the child must also be a list long enough to hold it.
    """

    if not isinstance(value, dict) or step.key not in value:
        return MISSING
    child = value[step.key]
    if step.index is None:
        return child
    if step.index is WILDCARD or not isinstance(child, list):
        return MISSING
    if step.index >= len(child):
        return MISSING
    return child[step.index]


def resolve(document: Any, steps: list[Step]) -> Any:
    current = document
    for step in steps:
        current = step_into(current, step)
        if current is MISSING:
            return MISSING
    return current


def get_at(document: Any, steps: list[Step]) -> tuple[Document, bool]:
    """Return ``(value, True)`` if ``steps`` resolve, else ``(None, False)``.

    Never mutates ``document`` and never raises for shape mismatches.
    """

    value = resolve(document, steps)
    if value is MISSING:
        return None, False
    return value, True


def set_overwrite(root: dict[str, Any], steps: list[Step], value: Document) -> None:
    """Place ``value`` at ``steps`` inside ``root``, creating containers.

    Anything found along the way whose type does not fit the next step is
    replaced: a mapping where a key is needed, a list where an index is.
    Lists grow to exactly ``index + 1`` with ``None`` padding.
    """

    current = root
    last = len(steps) - 1
    for position, step in enumerate(steps):
        child = current.get(step.key)

        if step.index is None:
            if position == last:
                current[step.key] = value
                return
            if not isinstance(child, dict):
                child = {}
                current[step.key] = child
            current = child
            continue

        if step.index is WILDCARD:
            raise ValueError(f"cannot set through wildcard step {step}")

        if not isinstance(child, list):
            child = []
            current[step.key] = child
        if step.index >= len(child):
            child.extend([None] * (step.index + 1 - len(child)))

        if position == last:
            child[step.index] = value
            return

        nested = child[step.index]
        if not isinstance(nested, dict):
            nested = {}
            child[step.index] = nested
        current = nested


def delete_at(document: Any, steps: list[Step]) -> None:
    """Remove the node at ``steps`` in place; a no-op if it does not resolve.

    Deleting a list element shifts the following elements left.
    """

    if not steps:
        return

    parent = resolve(document, steps[:-1])
    last = steps[-1]
    if not isinstance(parent, dict) or last.key not in parent:
        return

    if last.index is None:
        del parent[last.key]
        return

    items = parent[last.key]
    if last.index is WILDCARD or not isinstance(items, list):
        return
    if last.index < len(items):
        del items[last.index]


__all__ = [
    "MISSING",
    "delete_at",
    "get_at",
    "resolve",
    "set_overwrite",
    "step_into",
]
