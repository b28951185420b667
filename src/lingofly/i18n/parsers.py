# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Resource-set parsers: ``.properties``, YAML and JSON message files.

Every parser returns a flat ``{code: template}`` dict and raises
:class:`~lingofly.kernel.exceptions.CatalogLoadError` on syntax errors or
duplicate codes.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any

import yaml  # type: ignore[import-untyped]
from yaml.constructor import ConstructorError  # type: ignore[import-untyped]

from lingofly.kernel.exceptions import CatalogLoadError

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}

_SEPARATORS = "=:"


# ---------------------------------------------------------------------------
# .properties
# ---------------------------------------------------------------------------


def parse_properties(text: str, origin: str = "<string>") -> dict[str, str]:
    """Parse Java-style ``.properties`` text.

    Supported syntax: ``key=value``, ``key: value`` and ``key value``;
    ``#`` and ``!`` comment lines; a trailing backslash continues the line
    (leading whitespace of the next line is dropped); ``\\t``, ``\\n``,
    ``\\r``, ``\\f``, ``\\uXXXX`` and ``\\<char>`` escapes in keys and values.
    """
    messages: dict[str, str] = {}
    for lineno, line in _logical_lines(text):
        key, value = _split_entry(line)
        try:
            key = _unescape(key)
            value = _unescape(value)
        except ValueError as exc:
            raise CatalogLoadError(f"{origin}:{lineno}: {exc}", origin=origin) from exc
        if not key:
            raise CatalogLoadError(f"{origin}:{lineno}: entry has an empty code", origin=origin)
        if key in messages:
            raise CatalogLoadError(f"{origin}:{lineno}: duplicate code '{key}'", origin=origin)
        messages[key] = value
    return messages


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, logical_line)`` pairs, joining continuations."""
    buffer: list[str] = []
    start = 0
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.lstrip()
        if not buffer:
            if not line or line[0] in "#!":
                continue
            start = lineno
        if _continues(line):
            buffer.append(line[:-1])
            continue
        buffer.append(line)
        yield start, "".join(buffer)
        buffer = []
    if buffer:
        yield start, "".join(buffer)


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char.isspace():
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip()
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip()
    return key, rest


def _unescape(value: str) -> str:
    if "\\" not in value:
        return value
    out: list[str] = []
    index = 0
    length = len(value)
    while index < length:
        char = value[index]
        if char != "\\":
            out.append(char)
            index += 1
            continue
        if index + 1 >= length:
            index += 1
            continue
        nxt = value[index + 1]
        if nxt == "u":
            digits = value[index + 2 : index + 6]
            if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                raise ValueError(f"malformed \\u escape '\\u{digits}'")
            out.append(chr(int(digits, 16)))
            index += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        index += 2
    return "".join(out)


# ---------------------------------------------------------------------------
# YAML / JSON
# ---------------------------------------------------------------------------


class _MessageLoader(yaml.BaseLoader):
    """YAML loader that keeps every scalar as written and rejects repeated keys.

    ``BaseLoader`` applies no implicit typing, so ``No``, ``on`` and ``1.10``
    stay the strings they are in the file.
    """

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if key in seen:
                raise ConstructorError(None, None, f"duplicate code '{key}'", key_node.start_mark)
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def parse_yaml(text: str, origin: str = "<string>") -> dict[str, str]:
    """Parse a YAML resource set; nested keys are flattened with dots."""
    try:
        data = yaml.load(text, Loader=_MessageLoader) or {}  # noqa: S506
    except yaml.YAMLError as exc:
        raise CatalogLoadError(f"{origin}: invalid YAML: {exc}", origin=origin) from exc
    return _flatten_document(data, origin)


def parse_json(text: str, origin: str = "<string>") -> dict[str, str]:
    """Parse a JSON resource set; nested keys are flattened with dots."""

    def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in pairs:
            if key in result:
                raise CatalogLoadError(f"{origin}: duplicate code '{key}'", origin=origin)
            result[key] = value
        return result

    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicates) if text.strip() else {}
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"{origin}: invalid JSON: {exc}", origin=origin) from exc
    return _flatten_document(data or {}, origin)


def _flatten_document(data: Any, origin: str) -> dict[str, str]:
    if not isinstance(data, dict):
        raise CatalogLoadError(f"{origin}: top level must be a mapping", origin=origin)
    items: dict[str, str] = {}
    _flatten(data, "", items, origin)
    return items


def _flatten(data: dict[Any, Any], prefix: str, items: dict[str, str], origin: str) -> None:
    """Flatten a nested dict into dot-separated keys with string values."""
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            _flatten(value, full_key, items, origin)
            continue
        if not isinstance(value, str):
            raise CatalogLoadError(
                f"{origin}: code '{full_key}' must map to a string, not {type(value).__name__}",
                origin=origin,
            )
        if full_key in items:
            raise CatalogLoadError(f"{origin}: duplicate code '{full_key}'", origin=origin)
        items[full_key] = value


# Extension -> parser, in lookup priority order.
PARSERS: dict[str, Callable[[str, str], dict[str, str]]] = {
    ".properties": parse_properties,
    ".yaml": parse_yaml,
    ".yml": parse_yaml,
    ".json": parse_json,
}
