from __future__ import annotations

from .avro_format import AvroFormat
from .json_format import JSONFormat
from .parquet_format import ParquetFormat
from .registry import DEFAULT_REGISTRY, FormatRegistry
from .yaml_format import YAMLFormat

BUILTIN_FORMATS = (JSONFormat, YAMLFormat, AvroFormat, ParquetFormat)


def register_builtin_formats(registry: FormatRegistry | None = None) -> FormatRegistry:
    """Register json, yaml, avro and parquet with ``registry`` (default: global)."""

    target = DEFAULT_REGISTRY if registry is None else registry
    for format_cls in BUILTIN_FORMATS:
        target.register(format_cls())
    return target
