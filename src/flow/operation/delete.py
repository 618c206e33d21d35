from __future__ import annotations

from typing import Any

from ..path import delete_at, expand_steps, parse_path
from .base import _OperationModel, is_filtered


class Delete(_OperationModel):
    """Remove the nodes at the given paths, in order.

    Each path is expanded against the document as it stands after the
    previous deletions. Paths that do not resolve are ignored.
    """

    paths: list[str]

    def describe(self) -> str:
        return "delete(" + ", ".join(self.paths) + ")"

    def apply(self, document: Any) -> Any:
        if is_filtered(document):
            return document
        for path in self.paths:
            expanded = expand_steps(document, parse_path(path))
            # descending so earlier removals never shift later targets
            for steps in reversed(expanded):
                delete_at(document, steps)
        return document
