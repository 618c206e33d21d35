"""
Flow: pick, set, delete and filter fields in streamed structured documents.

This package uses a src-layout. Import the package as `flow`.
"""

from importlib.metadata import version

__version__ = version("flow")

from .config import FlowConfig
from .document import Document, normalize, stringify
from .errors import (
    DecodeError,
    DirectoryProcessingError,
    EmptyIndexError,
    EmptyPathError,
    FlowError,
    FormatDetectionError,
    FormatError,
    InvalidIndexError,
    InvalidSegmentError,
    NotSeekableError,
    OperationConfigError,
    PathSyntaxError,
    PipelineStepError,
    UnknownFormatError,
    UnsupportedWriteError,
)
from .format import (
    FormatRegistry,
    FormatterOptions,
    auto_detect,
    get_format,
    list_formats,
    register_builtin_formats,
)
from .operation import (
    FILTERED,
    Delete,
    Pick,
    Pipeline,
    Set,
    Where,
    build_pipeline,
    compose,
    is_filtered,
)
from .path import expand, get_at, parse_path
from .runner import process_directory, run, run_with_metadata
from .runtime import configure_logging, get_logger

__all__ = [
    "__version__",
    "FILTERED",
    "DecodeError",
    "Delete",
    "DirectoryProcessingError",
    "Document",
    "EmptyIndexError",
    "EmptyPathError",
    "FlowConfig",
    "FlowError",
    "FormatDetectionError",
    "FormatError",
    "FormatRegistry",
    "FormatterOptions",
    "InvalidIndexError",
    "InvalidSegmentError",
    "NotSeekableError",
    "OperationConfigError",
    "PathSyntaxError",
    "Pick",
    "Pipeline",
    "PipelineStepError",
    "Set",
    "UnknownFormatError",
    "UnsupportedWriteError",
    "Where",
    "auto_detect",
    "build_pipeline",
    "compose",
    "configure_logging",
    "expand",
    "get_at",
    "get_format",
    "get_logger",
    "is_filtered",
    "list_formats",
    "normalize",
    "parse_path",
    "process_directory",
    "register_builtin_formats",
    "run",
    "run_with_metadata",
    "stringify",
]
