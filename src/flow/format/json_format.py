"""JSON support: streamed top-level arrays and concatenated values."""

from __future__ import annotations

import codecs
import io
import json
from collections.abc import Iterator
from typing import IO, Any

import ijson
from rich.console import Console
from rich.highlighter import JSONHighlighter

from ..errors import DecodeError, FormatError
from .base import DocumentCallback, FormatterOptions, strip_prefix
from .registry import peekable
from .yaml_format import looks_like_yaml

_WHITESPACE = b" \t\r\n"
CHUNK_SIZE = 64 * 1024


class JSONDetector:
    def detect(self, peek: bytes) -> int:
        head = strip_prefix(peek)
        if not head:
            return 80
        if head[0] in "{[":
            return 100
        if head.startswith("%") or head.startswith("---") or looks_like_yaml(head):
            return 0
        return 50


class JSONParser:
    """Streams JSON values from a byte stream with ijson.

    If the first value is an array its elements are handed on one by one as
    soon as each is complete. Any further top-level values (whitespace or
    newline separated) follow, each as a single document.
    """

    def __init__(self, stream: IO[bytes], chunk_size: int = CHUNK_SIZE) -> None:
        self._stream = _skip_bom(stream)
        self._chunk_size = chunk_size

    def for_each(self, callback: DocumentCallback) -> None:
        documents = self._documents()
        while True:
            try:
                document = next(documents)
            except StopIteration:
                return
            except (ijson.JSONError, UnicodeDecodeError) as exc:
                raise DecodeError(f"json decode: {exc}") from exc
            callback(document)

    def _documents(self) -> Iterator[Any]:
        # an empty stream is a premature EOF to the yajl backends
        if _only_whitespace_left(self._stream):
            return
        events = ijson.parse(
            self._stream,
            buf_size=self._chunk_size,
            multiple_values=True,
            use_float=True,
        )
        first = True
        in_leading_array = False
        builder: ijson.ObjectBuilder | None = None
        depth = 0

        for _, event, value in events:
            if first:
                first = False
                if event == "start_array":
                    in_leading_array = True
                    continue
            if builder is None:
                if in_leading_array and event == "end_array":
                    in_leading_array = False
                    continue
                builder = ijson.ObjectBuilder()

            builder.event(event, value)
            if event in ("start_map", "start_array"):
                depth += 1
            elif event in ("end_map", "end_array"):
                depth -= 1
            if depth == 0:
                yield builder.value
                builder = None


def _skip_bom(stream: IO[bytes]) -> io.BufferedReader:
    reader = peekable(stream)
    if reader.peek(len(codecs.BOM_UTF8)).startswith(codecs.BOM_UTF8):
        reader.read(len(codecs.BOM_UTF8))
    return reader


def _only_whitespace_left(reader: io.BufferedReader) -> bool:
    """Consume leading whitespace and report whether the stream is exhausted."""

    while True:
        head = reader.peek(1)
        if not head:
            return True
        if head.lstrip(_WHITESPACE):
            return False
        reader.read(len(head))


class JSONFormatter:
    """Writes one JSON document per call, newline terminated.

    Pretty output uses two-space indentation; compact output has no spaces.
    With ``color`` the text is highlighted through rich.
    """

    def __init__(self, stream: IO[str], options: FormatterOptions | None = None):
        self._stream = stream
        self._options = options or FormatterOptions()
        self._console: Console | None = None
        if self._options.color:
            self._console = Console(
                file=stream,
                force_terminal=True,
                color_system="256",
                soft_wrap=True,
                highlighter=JSONHighlighter(),
            )

    def write(self, document: Any) -> None:
        try:
            if self._options.compact:
                text = json.dumps(
                    document,
                    ensure_ascii=False,
                    allow_nan=False,
                    separators=(",", ":"),
                )
            else:
                text = json.dumps(
                    document, ensure_ascii=False, allow_nan=False, indent=2
                )
        except (TypeError, ValueError) as exc:
            raise FormatError(f"json encode: {exc}") from exc

        if self._console is not None:
            self._console.print(text, markup=False, emoji=False)
        else:
            self._stream.write(text + "\n")

    def close(self) -> None:
        self._stream.flush()


class JSONFormat:
    name = "json"

    def detector(self) -> JSONDetector:
        return JSONDetector()

    def new_parser(self, stream: IO[bytes]) -> JSONParser:
        return JSONParser(stream)

    def new_formatter(
        self, stream: IO[str], options: FormatterOptions | None = None
    ) -> JSONFormatter:
        return JSONFormatter(stream, options)


__all__ = ["JSONDetector", "JSONFormat", "JSONFormatter", "JSONParser"]
