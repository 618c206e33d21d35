"""Generic document values and helpers shared by the format drivers."""

from __future__ import annotations

import base64
import datetime
import uuid
from collections.abc import Mapping
from decimal import Decimal
from typing import TypeAlias

Scalar: TypeAlias = str | int | float | bool | None
Document: TypeAlias = Scalar | list["Document"] | dict[str, "Document"]


def normalize(value: object) -> Document:
    """Convert decoder output into a JSON-compatible document.

    Mapping keys that are not strings are rendered with :func:`stringify`
    so operations never see non-string keys.
    """

    if isinstance(value, Mapping):
        return {
            key if isinstance(key, str) else stringify(key).strip(): normalize(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, datetime.timedelta):
        return value.total_seconds()
    if isinstance(value, (Decimal, uuid.UUID)):
        return str(value)
    return str(value)


def stringify(value: object) -> str:
    """Render ``value`` with the default text representation used for matching."""

    match value:
        case None:
            return "<nil>"
        case bool():
            return "true" if value else "false"
        case float() if value.is_integer():
            return str(int(value))
        case list() | tuple():
            return "[" + " ".join(stringify(item) for item in value) + "]"
        case Mapping():
            items = sorted(value.items(), key=lambda item: str(item[0]))
            pairs = " ".join(f"{stringify(k)}:{stringify(v)}" for k, v in items)
            return f"map[{pairs}]"
        case _:
            return str(value)


__all__ = ["Document", "Scalar", "normalize", "stringify"]
