"""Read-only Avro object container file support."""

from __future__ import annotations

from typing import IO, NoReturn

import fastavro

from ..document import normalize
from ..errors import DecodeError, UnsupportedWriteError
from .base import DocumentCallback, FormatterOptions

AVRO_MAGIC = b"Obj\x01"


class AvroDetector:
    def detect(self, peek: bytes) -> int:
        return 100 if peek.startswith(AVRO_MAGIC) else 0


class AvroParser:
    """Streams records from a container file; the schema comes from its header."""

    def __init__(self, stream: IO[bytes]) -> None:
        try:
            self._reader = fastavro.reader(stream)
        except (ValueError, EOFError) as exc:
            raise DecodeError(f"failed to create avro decoder: {exc}") from exc

    @property
    def schema(self) -> object:
        return self._reader.writer_schema

    def for_each(self, callback: DocumentCallback) -> None:
        records = iter(self._reader)
        while True:
            try:
                record = next(records)
            except StopIteration:
                return
            except (ValueError, EOFError) as exc:
                raise DecodeError(f"failed to decode avro record: {exc}") from exc
            callback(normalize(record))


class AvroFormat:
    name = "avro"

    def detector(self) -> AvroDetector:
        return AvroDetector()

    def new_parser(self, stream: IO[bytes]) -> AvroParser:
        return AvroParser(stream)

    def new_formatter(
        self, stream: IO[str], options: FormatterOptions | None = None
    ) -> NoReturn:
        raise UnsupportedWriteError(self.name)


__all__ = ["AVRO_MAGIC", "AvroDetector", "AvroFormat", "AvroParser"]
