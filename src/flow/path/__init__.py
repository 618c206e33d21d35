from .access import MISSING, delete_at, get_at, resolve, set_overwrite, step_into
from .expand import expand, expand_steps
from .steps import (
    WILDCARD,
    Index,
    Step,
    Wildcard,
    final_key,
    format_path,
    has_wildcard,
    parse_path,
)

__all__ = [
    "MISSING",
    "WILDCARD",
    "Index",
    "Step",
    "Wildcard",
    "delete_at",
    "expand",
    "expand_steps",
    "final_key",
    "format_path",
    "get_at",
    "has_wildcard",
    "parse_path",
    "resolve",
    "set_overwrite",
    "step_into",
]
