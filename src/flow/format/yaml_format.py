"""YAML support: ``---`` separated documents in, block-style YAML out."""

from __future__ import annotations

from typing import IO, Any

import yaml

from ..document import normalize, stringify
from ..errors import DecodeError, FormatError
from .base import DocumentCallback, FormatterOptions, strip_prefix


def looks_like_yaml(head: str) -> bool:
    """Whether the first line has a ``:`` before any ``,`` or ``}``."""

    line = head.split("\n", 1)[0]
    colon = line.find(":")
    if colon < 0:
        return False
    for structural in (",", "}"):
        position = line.find(structural)
        if 0 <= position < colon:
            return False
    return True


class YAMLDetector:
    def detect(self, peek: bytes) -> int:
        head = strip_prefix(peek)
        if not head:
            return 0
        if head.startswith("%") or head.startswith("---"):
            return 100
        if head[0] in "{[":
            return 0
        if looks_like_yaml(head):
            return 90
        return 0


_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _FlowLoader(yaml.SafeLoader):
    """Safe loader that keeps every mapping string keyed.

    Keys are converted while the mapping is built, so ``1`` and ``true``
    stay distinct keys. Plain timestamps are left as the text they were
    written as.
    """

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            raise yaml.constructor.ConstructorError(
                None,
                None,
                f"expected a mapping node, but found {node.id}",
                node.start_mark,
            )
        self.flatten_mapping(node)
        mapping = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=True)
            if not isinstance(key, str):
                key = stringify(key).strip()
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


_FlowLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class YAMLParser:
    """Streams each document of a YAML stream.

    Keys that YAML decodes as numbers, booleans or null are rendered as
    strings, so every mapping handed on is string keyed.
    """

    def __init__(self, stream: IO[bytes]) -> None:
        self._stream = stream

    def for_each(self, callback: DocumentCallback) -> None:
        documents = yaml.load_all(self._stream, Loader=_FlowLoader)
        while True:
            try:
                document = next(documents)
            except StopIteration:
                return
            except yaml.YAMLError as exc:
                raise DecodeError(f"yaml decode: {exc}") from exc
            callback(normalize(document))


class YAMLFormatter:
    def __init__(self, stream: IO[str], options: FormatterOptions | None = None):
        # colour is not applied to YAML output
        self._stream = stream
        self._options = options or FormatterOptions()
        self._written = 0

    def write(self, document: Any) -> None:
        try:
            text = yaml.safe_dump(
                document,
                explicit_start=self._written > 0,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                indent=2,
            )
        except yaml.YAMLError as exc:
            raise FormatError(f"yaml encode: {exc}") from exc
        if text.endswith("\n...\n"):
            text = text[: -len("...\n")]
        self._stream.write(text)
        self._written += 1

    def close(self) -> None:
        self._stream.flush()


class YAMLFormat:
    name = "yaml"

    def detector(self) -> YAMLDetector:
        return YAMLDetector()

    def new_parser(self, stream: IO[bytes]) -> YAMLParser:
        return YAMLParser(stream)

    def new_formatter(
        self, stream: IO[str], options: FormatterOptions | None = None
    ) -> YAMLFormatter:
        return YAMLFormatter(stream, options)


__all__ = [
    "YAMLDetector",
    "YAMLFormat",
    "YAMLFormatter",
    "YAMLParser",
    "looks_like_yaml",
]
