"""Contracts every data format implements.

A format bundles three roles:

1. ``Detector``: scores a byte prefix 0..100 for how likely it is this format.
2. ``Parser``: streams decoded documents one at a time from a binary stream.
3. ``Formatter``: writes documents to a text stream, then is closed once.

Parsers stream rather than buffer: JSON arrays yield one element at a time,
YAML yields each ``---`` document, columnar and container formats yield one
row or record at a time.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import IO, Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

DocumentCallback = Callable[[Any], None]


class FormatterOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    color: bool = False
    compact: bool = False


@runtime_checkable
class Detector(Protocol):
    def detect(self, peek: bytes) -> int: ...


@runtime_checkable
class Parser(Protocol):
    def for_each(self, callback: DocumentCallback) -> None: ...


@runtime_checkable
class Formatter(Protocol):
    def write(self, document: Any) -> None: ...

    def close(self) -> None: ...


@runtime_checkable
class Format(Protocol):
    name: str

    def detector(self) -> Detector: ...

    def new_parser(self, stream: IO[bytes]) -> Parser: ...

    def new_formatter(
        self, stream: IO[str], options: FormatterOptions | None = None
    ) -> Formatter: ...


def strip_prefix(peek: bytes) -> str:
    """Decode a peeked prefix leniently and drop leading whitespace and BOM."""

    text = peek.decode("utf-8", errors="ignore")
    return text.lstrip("\ufeff \t\r\n")


__all__ = [
    "Detector",
    "DocumentCallback",
    "Format",
    "Formatter",
    "FormatterOptions",
    "Parser",
    "strip_prefix",
]
