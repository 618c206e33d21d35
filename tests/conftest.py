import io

import pytest

from flow.format import FormatRegistry, register_builtin_formats


@pytest.fixture
def registry() -> FormatRegistry:
    return register_builtin_formats(FormatRegistry())


@pytest.fixture
def as_stream():
    def _as_stream(text: str | bytes) -> io.BytesIO:
        if isinstance(text, str):
            text = text.encode("utf-8")
        return io.BytesIO(text)

    return _as_stream
