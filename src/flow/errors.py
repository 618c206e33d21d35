from __future__ import annotations


class FlowError(Exception):
    """Base class for every error raised by flow."""


class PathSyntaxError(FlowError, ValueError):
    """A path expression could not be parsed."""

    def __init__(self, message: str, *, path: str, segment: str | None = None):
        super().__init__(message)
        self.path = path
        self.segment = segment


class EmptyPathError(PathSyntaxError):
    def __init__(self, path: str = ""):
        super().__init__("empty path", path=path)


class InvalidSegmentError(PathSyntaxError):
    def __init__(self, path: str, segment: str):
        super().__init__(f"invalid segment {segment!r}", path=path, segment=segment)


class EmptyIndexError(PathSyntaxError):
    def __init__(self, path: str, segment: str):
        super().__init__(f"empty index in {segment!r}", path=path, segment=segment)


class InvalidIndexError(PathSyntaxError):
    def __init__(self, path: str, segment: str):
        super().__init__(
            f"invalid non-negative index in {segment!r}", path=path, segment=segment
        )


class OperationConfigError(FlowError, ValueError):
    """An assignment or condition string is malformed."""


class PipelineStepError(FlowError):
    """An operation failed while a pipeline was applying it."""

    def __init__(self, index: int, description: str, cause: BaseException):
        if description:
            message = f"pipeline step {index} ({description}) failed: {cause}"
        else:
            message = f"pipeline step {index} failed: {cause}"
        super().__init__(message)
        self.index = index
        self.description = description
        self.cause = cause


class FormatError(FlowError):
    """Base class for format-level failures; fatal to the current stream."""


class UnknownFormatError(FormatError, KeyError):
    def __init__(self, name: str):
        super().__init__(f"unknown format: {name}")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class FormatDetectionError(FormatError):
    pass


class DecodeError(FormatError):
    pass


class UnsupportedWriteError(FormatError):
    def __init__(self, name: str):
        super().__init__(
            f"{name} format does not support writing (formatter not implemented)"
        )
        self.name = name


class NotSeekableError(FormatError):
    pass


class DirectoryProcessingError(FlowError):
    def __init__(self, errors: list[FlowError | OSError]):
        super().__init__(
            f"directory processing completed with {len(errors)} error(s)"
        )
        self.errors = errors


__all__ = [
    "DecodeError",
    "DirectoryProcessingError",
    "EmptyIndexError",
    "EmptyPathError",
    "FlowError",
    "FormatDetectionError",
    "FormatError",
    "InvalidIndexError",
    "InvalidSegmentError",
    "NotSeekableError",
    "OperationConfigError",
    "PathSyntaxError",
    "PipelineStepError",
    "UnknownFormatError",
    "UnsupportedWriteError",
]
