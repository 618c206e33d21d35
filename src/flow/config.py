from __future__ import annotations

from pathlib import Path

import chz

from .errors import UnknownFormatError

_EXTENSION_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".avro": "avro",
    ".parquet": "parquet",
}

_DIRECTORY_EXTENSIONS = {
    "json": (".json",),
    "yaml": (".yaml", ".yml"),
    "avro": (".avro",),
    "parquet": (".parquet",),
}

DEFAULT_FORMAT = "json"


@chz.chz
class FlowConfig:
    """Options for one run: where documents come from, what happens to them,
    and how they are written."""

    in_file: str | None = chz.field(default=None)
    out_file: str | None = chz.field(default=None)
    input_dir: str | None = chz.field(default=None)
    pick_paths: tuple[str, ...] = chz.field(default=())
    set_pairs: tuple[str, ...] = chz.field(default=())
    delete_paths: tuple[str, ...] = chz.field(default=())
    where_pairs: tuple[str, ...] = chz.field(default=())
    from_format: str | None = chz.field(default=None)
    to_format: str | None = chz.field(default=None)
    compact: bool = chz.field(default=False)
    no_color: bool = chz.field(default=False)
    preserve_hierarchy: bool = chz.field(default=False)


def determine_input_format(config: FlowConfig) -> str | None:
    """Pick the input format name, or ``None`` to auto-detect from the stream.

    An explicit ``from_format`` wins, then the extension of ``in_file``.
    """

    if config.from_format:
        return config.from_format
    if config.in_file:
        return _EXTENSION_FORMATS.get(Path(config.in_file).suffix.lower())
    return None


def output_format(config: FlowConfig) -> str:
    return config.to_format or DEFAULT_FORMAT


def directory_extensions(format_name: str | None) -> tuple[str, ...]:
    name = format_name or DEFAULT_FORMAT
    try:
        return _DIRECTORY_EXTENSIONS[name]
    except KeyError:
        raise UnknownFormatError(name) from None


__all__ = [
    "DEFAULT_FORMAT",
    "FlowConfig",
    "determine_input_format",
    "directory_extensions",
    "output_format",
]
