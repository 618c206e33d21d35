from .base import FILTERED, Filtered, Operation, is_filtered
from .delete import Delete
from .pick import Pick
from .pipeline import Pipeline, build_pipeline, compose
from .set import Assignment, Set, parse_value
from .where import Condition, Where

__all__ = [
    "FILTERED",
    "Assignment",
    "Condition",
    "Delete",
    "Filtered",
    "Operation",
    "Pick",
    "Pipeline",
    "Set",
    "Where",
    "build_pipeline",
    "compose",
    "is_filtered",
    "parse_value",
]
