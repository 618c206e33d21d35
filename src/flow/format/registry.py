from __future__ import annotations

import io
import logging
import threading
from typing import IO

from ..errors import FormatDetectionError, UnknownFormatError
from .base import Format

logger = logging.getLogger(__name__)

PEEK_SIZE = 1024
BUFFER_SIZE = 64 * 1024


class FormatRegistry:
    """Name to format mapping, safe to share between threads."""

    def __init__(self) -> None:
        self._formats: dict[str, Format] = {}
        self._lock = threading.RLock()

    def register(self, fmt: Format) -> None:
        """Add ``fmt``, replacing any format registered under the same name."""

        with self._lock:
            self._formats[fmt.name] = fmt
        logger.debug("registered format %s", fmt.name)

    def get(self, name: str) -> Format:
        with self._lock:
            try:
                return self._formats[name]
            except KeyError:
                raise UnknownFormatError(name) from None

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._formats)

    def clear(self) -> None:
        with self._lock:
            self._formats.clear()

    def auto_detect(self, stream: IO[bytes]) -> tuple[Format, io.BufferedReader]:
        """Choose the format whose detector is most confident about ``stream``.

        The prefix is peeked, not consumed: read the returned buffered stream
        instead of ``stream`` afterwards. Detectors that raise are skipped.
        """

        reader = peekable(stream)
        peek = reader.peek(PEEK_SIZE)[:PEEK_SIZE]

        best: Format | None = None
        best_score = 0
        with self._lock:
            candidates = list(self._formats.values())
        for fmt in candidates:
            try:
                score = fmt.detector().detect(peek)
            except (ValueError, UnicodeError) as exc:
                logger.debug("detector for %s failed: %s", fmt.name, exc)
                continue
            logger.debug("detector %s scored %d", fmt.name, score)
            if score > best_score:
                best, best_score = fmt, score

        if best is None:
            raise FormatDetectionError("unable to detect format from input")
        logger.debug("detected format %s (confidence %d)", best.name, best_score)
        return best, reader


def peekable(stream: IO[bytes]) -> io.BufferedReader:
    if isinstance(stream, io.BufferedReader):
        return stream
    return io.BufferedReader(stream, buffer_size=BUFFER_SIZE)  # type: ignore[arg-type]


DEFAULT_REGISTRY = FormatRegistry()


def register(fmt: Format) -> None:
    DEFAULT_REGISTRY.register(fmt)


def get_format(name: str) -> Format:
    return DEFAULT_REGISTRY.get(name)


def list_formats() -> list[str]:
    return DEFAULT_REGISTRY.names()


def auto_detect(stream: IO[bytes]) -> tuple[Format, io.BufferedReader]:
    return DEFAULT_REGISTRY.auto_detect(stream)


__all__ = [
    "DEFAULT_REGISTRY",
    "PEEK_SIZE",
    "FormatRegistry",
    "auto_detect",
    "get_format",
    "list_formats",
    "peekable",
    "register",
]
