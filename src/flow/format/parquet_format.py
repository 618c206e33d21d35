"""Read-only Parquet support.

The footer holds the file metadata, so the input has to be seekable; a pipe
or standard input is rejected up front.
"""

from __future__ import annotations

from typing import IO, NoReturn

import pyarrow as pa
import pyarrow.parquet as pq

from ..document import normalize
from ..errors import DecodeError, NotSeekableError, UnsupportedWriteError
from .base import DocumentCallback, FormatterOptions

PARQUET_MAGIC = b"PAR1"
BATCH_SIZE = 1024


class ParquetDetector:
    def detect(self, peek: bytes) -> int:
        return 100 if peek.startswith(PARQUET_MAGIC) else 0


def _is_seekable(stream: IO[bytes]) -> bool:
    seekable = getattr(stream, "seekable", None)
    return bool(seekable is not None and seekable())


class ParquetParser:
    def __init__(self, stream: IO[bytes], batch_size: int = BATCH_SIZE) -> None:
        if not _is_seekable(stream):
            raise NotSeekableError(
                "parquet format requires seekable file input (not stdin or pipe)"
            )
        try:
            self._file = pq.ParquetFile(stream)
        except (pa.ArrowException, OSError) as exc:
            raise DecodeError(f"failed to open parquet file: {exc}") from exc
        self._batch_size = batch_size

    @property
    def num_rows(self) -> int:
        return self._file.metadata.num_rows

    def for_each(self, callback: DocumentCallback) -> None:
        batches = self._file.iter_batches(batch_size=self._batch_size)
        while True:
            try:
                batch = next(batches)
            except StopIteration:
                return
            except (pa.ArrowException, OSError) as exc:
                raise DecodeError(f"failed to read parquet row: {exc}") from exc
            for row in batch.to_pylist():
                callback(normalize(row))


class ParquetFormat:
    name = "parquet"

    def detector(self) -> ParquetDetector:
        return ParquetDetector()

    def new_parser(self, stream: IO[bytes]) -> ParquetParser:
        return ParquetParser(stream)

    def new_formatter(
        self, stream: IO[str], options: FormatterOptions | None = None
    ) -> NoReturn:
        raise UnsupportedWriteError(self.name)


__all__ = ["PARQUET_MAGIC", "ParquetDetector", "ParquetFormat", "ParquetParser"]
