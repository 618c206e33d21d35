from .avro_format import AvroFormat
from .base import Detector, Format, Formatter, FormatterOptions, Parser
from .builtin import BUILTIN_FORMATS, register_builtin_formats
from .json_format import JSONFormat
from .parquet_format import ParquetFormat
from .registry import (
    DEFAULT_REGISTRY,
    FormatRegistry,
    auto_detect,
    get_format,
    list_formats,
    register,
)
from .yaml_format import YAMLFormat

__all__ = [
    "BUILTIN_FORMATS",
    "DEFAULT_REGISTRY",
    "AvroFormat",
    "Detector",
    "Format",
    "FormatRegistry",
    "Formatter",
    "FormatterOptions",
    "JSONFormat",
    "ParquetFormat",
    "Parser",
    "YAMLFormat",
    "auto_detect",
    "get_format",
    "list_formats",
    "register",
    "register_builtin_formats",
]
