"""Stream orchestration: decode, transform and write documents."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO

from .config import (
    FlowConfig,
    determine_input_format,
    directory_extensions,
    output_format,
)
from .errors import DirectoryProcessingError, FlowError
from .format import DEFAULT_REGISTRY, FormatRegistry, Formatter, FormatterOptions
from .operation import Pipeline, build_pipeline, is_filtered

logger = logging.getLogger(__name__)


@contextmanager
def open_input(path: str | None) -> Iterator[IO[bytes]]:
    if not path:
        yield sys.stdin.buffer
        return
    with open(path, "rb") as handle:
        yield handle


@contextmanager
def open_output(path: str | None) -> Iterator[IO[str]]:
    if not path:
        yield sys.stdout
        return
    with open(path, "w", encoding="utf-8") as handle:
        yield handle


def _use_color(config: FlowConfig, stream: IO[str]) -> bool:
    if config.no_color:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty is not None and isatty())


def _new_formatter(
    config: FlowConfig, stream: IO[str], registry: FormatRegistry
) -> Formatter:
    options = FormatterOptions(
        color=_use_color(config, stream), compact=config.compact
    )
    return registry.get(output_format(config)).new_formatter(stream, options)


def _transform_stream(
    in_stream: IO[bytes],
    formatter: Formatter,
    pipeline: Pipeline,
    input_format: str | None,
    registry: FormatRegistry,
    filename: str | None = None,
) -> int:
    if input_format is None:
        fmt, in_stream = registry.auto_detect(in_stream)
    else:
        fmt = registry.get(input_format)
    parser = fmt.new_parser(in_stream)

    row = 0
    written = 0

    def handle(document: object) -> None:
        nonlocal row, written
        row += 1
        result = document if pipeline.empty else pipeline.apply(document)
        if is_filtered(result):
            logger.debug("row %d filtered out", row)
            return
        if filename is not None:
            result = {"_file": filename, "_row": row, "data": result}
        formatter.write(result)
        written += 1

    parser.for_each(handle)
    logger.debug(
        "%s: %d document(s) read, %d written", filename or fmt.name, row, written
    )
    return written


def run(
    in_stream: IO[bytes],
    out_stream: IO[str],
    config: FlowConfig,
    *,
    registry: FormatRegistry | None = None,
) -> int:
    """Run one pass over ``in_stream`` and return the number of documents written.

    The first failing document aborts the whole stream.
    """

    registry = registry or DEFAULT_REGISTRY
    pipeline = build_pipeline(config)
    formatter = _new_formatter(config, out_stream, registry)
    try:
        return _transform_stream(
            in_stream,
            formatter,
            pipeline,
            determine_input_format(config),
            registry,
        )
    finally:
        formatter.close()


def run_with_metadata(
    in_stream: IO[bytes],
    out_stream: IO[str],
    config: FlowConfig,
    filename: str,
    *,
    registry: FormatRegistry | None = None,
) -> int:
    """Like :func:`run`, wrapping every output as ``{"_file", "_row", "data"}``.

    ``_row`` counts decoded documents from 1, including filtered ones.
    """

    registry = registry or DEFAULT_REGISTRY
    pipeline = build_pipeline(config)
    formatter = _new_formatter(config, out_stream, registry)
    try:
        return _transform_stream(
            in_stream,
            formatter,
            pipeline,
            determine_input_format(config),
            registry,
            filename=filename,
        )
    finally:
        formatter.close()


def iter_directory(root: Path, extensions: tuple[str, ...]) -> Iterator[Path]:
    for path in sorted(root.rglob("*")):
        if path.is_file() and path.suffix.lower() in extensions:
            yield path


def process_directory(
    config: FlowConfig,
    out_stream: IO[str],
    *,
    registry: FormatRegistry | None = None,
) -> int:
    """Process every matching file under ``config.input_dir``.

    A failing file is logged and skipped; once all files have been tried a
    :class:`DirectoryProcessingError` lists every failure.
    """

    if not config.input_dir:
        raise ValueError("process_directory requires input_dir")
    root = Path(config.input_dir)
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")

    registry = registry or DEFAULT_REGISTRY
    input_format = config.from_format or "json"
    extensions = directory_extensions(input_format)
    pipeline = build_pipeline(config)

    errors: list[FlowError | OSError] = []
    files = 0
    written = 0
    formatter = _new_formatter(config, out_stream, registry)
    try:
        for path in iter_directory(root, extensions):
            files += 1
            try:
                with path.open("rb") as handle:
                    written += _transform_stream(
                        handle,
                        formatter,
                        pipeline,
                        input_format,
                        registry,
                        filename=str(path),
                    )
            except (FlowError, OSError) as exc:
                logger.error("failed to process %s: %s", path, exc)
                errors.append(exc)
    finally:
        formatter.close()

    if files == 0:
        logger.warning(
            "no files with extensions %s found in %s", list(extensions), root
        )
    if errors:
        logger.error("encountered %d error(s) during processing", len(errors))
        raise DirectoryProcessingError(errors)
    return written


__all__ = [
    "iter_directory",
    "open_input",
    "open_output",
    "process_directory",
    "run",
    "run_with_metadata",
]
