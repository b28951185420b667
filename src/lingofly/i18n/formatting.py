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
"""Positional ``{n}`` placeholder handling for message templates."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

_PLACEHOLDER_RE = re.compile(r"\{(\d+)\}")

# "{" followed by digits that never reach a closing brace, or a trailing "{".
_MALFORMED_RE = re.compile(r"\{\d+(?![\d}])|\{$")


def format_message(template: str, args: Sequence[Any] = ()) -> str:
    """Replace ``{0}``, ``{1}``, ... in *template* with ``str(args[i])``.

    Substitution is a single pass, so argument text that itself looks like
    a placeholder is never expanded. Placeholders without a matching
    argument are left as literal text and extra arguments are ignored.
    """
    if not args:
        return template

    def _replace(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER_RE.sub(_replace, template)


def placeholder_indexes(template: str) -> set[int]:
    """Return the set of argument indexes referenced by *template*."""
    return {int(m.group(1)) for m in _PLACEHOLDER_RE.finditer(template)}


def validate_template(template: str) -> None:
    """Raise ``ValueError`` if *template* has an unterminated placeholder."""
    match = _MALFORMED_RE.search(template)
    if match is not None:
        raise ValueError(f"unterminated placeholder at offset {match.start()}")
