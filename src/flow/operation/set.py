from __future__ import annotations

import json
from copy import deepcopy
from typing import Any

from pydantic import JsonValue

from ..errors import OperationConfigError
from ..path import Step, expand_steps, has_wildcard, parse_path, set_overwrite
from .base import _OperationModel, is_filtered, split_pair


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_value(text: str) -> JsonValue:
    """Decode ``text`` as JSON, falling back to the literal string.

    ``user.name=alice`` therefore needs no quoting, while ``count=3`` and
    ``tags=["a"]`` keep their JSON types.
    """

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return text


def _targets(root: dict[str, Any], steps: list[Step]) -> list[list[Step]]:
    # only the wildcard prefix has to exist; the tail may be created
    if not has_wildcard(steps):
        return [steps]
    last = max(i for i, step in enumerate(steps) if step.is_wildcard)
    head, tail = steps[: last + 1], steps[last + 1 :]
    return [[*prefix, *tail] for prefix in expand_steps(root, head)]


class Assignment(_OperationModel):
    path: str
    value: JsonValue = None


class Set(_OperationModel):
    """Assign values at paths, creating or overwriting containers on the way."""

    assignments: list[Assignment]

    @classmethod
    def from_pairs(cls, pairs: list[str] | tuple[str, ...]) -> Set:
        assignments: list[Assignment] = []
        for pair in pairs:
            split = split_pair(pair)
            if split is None:
                raise OperationConfigError(
                    f"invalid set {pair!r} (expected path=value)"
                )
            path, raw = split[0].strip(), split[1].strip()
            if not path:
                raise OperationConfigError(f"invalid set {pair!r}: empty path")
            parse_path(path)
            assignments.append(Assignment(path=path, value=parse_value(raw)))
        return cls(assignments=assignments)

    def describe(self) -> str:
        return "set(" + ", ".join(a.path for a in self.assignments) + ")"

    def apply(self, document: Any) -> Any:
        if is_filtered(document):
            return document
        root = document if isinstance(document, dict) else {}

        for assignment in self.assignments:
            steps = parse_path(assignment.path)
            for target in _targets(root, steps):
                set_overwrite(root, target, deepcopy(assignment.value))

        return root
