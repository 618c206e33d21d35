from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..config import FlowConfig
from ..errors import PipelineStepError
from .base import Operation
from .delete import Delete
from .pick import Pick
from .set import Set
from .where import Where

logger = logging.getLogger(__name__)


class Pipeline:
    """Ordered operations applied left to right, each receiving the last output.

    ``FILTERED`` is passed along like any other value; callers check for it
    once the pipeline has finished.
    """

    def __init__(self, ops: Iterable[Operation] = ()) -> None:
        self.ops: list[Operation] = list(ops)

    def append(self, *ops: Operation) -> None:
        self.ops.extend(ops)

    @property
    def empty(self) -> bool:
        return not self.ops

    def describe(self) -> str:
        return " | ".join(op.describe() for op in self.ops)

    def apply(self, document: Any) -> Any:
        current = document
        for index, op in enumerate(self.ops):
            try:
                current = op.apply(current)
            except Exception as exc:
                raise PipelineStepError(index, op.describe(), exc) from exc
        return current


def compose(document: Any, *ops: Operation) -> Any:
    return Pipeline(ops).apply(document)


def build_pipeline(config: FlowConfig) -> Pipeline:
    """Build the pipeline described by ``config``.

    Filtering runs first so non-matching documents are dropped early, then
    pick, set and delete.
    """

    pipeline = Pipeline()
    if config.where_pairs:
        pipeline.append(Where.from_pairs(config.where_pairs))
    if config.pick_paths:
        pipeline.append(
            Pick(
                paths=list(config.pick_paths),
                preserve_hierarchy=config.preserve_hierarchy,
            )
        )
    if config.set_pairs:
        pipeline.append(Set.from_pairs(config.set_pairs))
    if config.delete_paths:
        pipeline.append(Delete(paths=list(config.delete_paths)))

    logger.debug("pipeline: %s", pipeline.describe() or "(empty)")
    return pipeline
