from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


class Filtered:
    """Marker returned by an operation to drop a document downstream.

    Distinct from ``None`` so a legitimately null document is never mistaken
    for a filtered one.
    """

    _instance: Filtered | None = None

    def __new__(cls) -> Filtered:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FILTERED"


FILTERED: Filtered = Filtered()


def is_filtered(value: object) -> bool:
    return value is FILTERED


@runtime_checkable
class Operation(Protocol):
    def apply(self, document: Any) -> Any: ...

    def describe(self) -> str: ...


class _OperationModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


def split_pair(text: str) -> tuple[str, str] | None:
    """Split ``text`` on its first ``=`` that is not escaped as ``\\=``.

    Returns ``None`` when there is no separator. Escapes are removed from
    the left-hand side.
    """

    position = 0
    while True:
        position = text.find("=", position)
        if position < 0:
            return None
        if position > 0 and text[position - 1] == "\\":
            position += 1
            continue
        return text[:position].replace("\\=", "="), text[position + 1 :]


__all__ = ["FILTERED", "Filtered", "Operation", "is_filtered", "split_pair"]
