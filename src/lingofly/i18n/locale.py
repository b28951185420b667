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
"""Locale tags and request locale resolution."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

ROOT_LOCALE = ""


def normalize_locale(tag: str | None) -> str:
    """Normalize a language tag to ``ll`` or ``ll_RR`` form.

    ``de-at``, ``de_AT`` and ``DE-AT`` all become ``de_AT``. Subtags past
    the region (scripts, variants) are kept as given. ``None`` and blank
    tags map to :data:`ROOT_LOCALE`.
    """
    if not tag:
        return ROOT_LOCALE
    parts = [p for p in tag.strip().replace("-", "_").split("_") if p]
    if not parts:
        return ROOT_LOCALE
    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 2 and part.isalpha():
            normalized.append(part.upper())
        elif len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        else:
            normalized.append(part)
    return "_".join(normalized)


def candidate_locales(tag: str | None) -> list[str]:
    """Return lookup candidates for *tag*, most specific first.

    The chain is the full normalized tag followed by its primary language
    subtag: ``de_AT`` gives ``["de_AT", "de"]``. The root locale yields an
    empty list; callers append the default set themselves.
    """
    normalized = normalize_locale(tag)
    if not normalized:
        return []
    language = normalized.split("_", 1)[0]
    if language == normalized:
        return [normalized]
    return [normalized, language]


@runtime_checkable
class LocaleResolver(Protocol):
    """Port for determining the locale from an incoming request."""

    def resolve_locale(self, request: Any) -> str: ...


class AcceptHeaderLocaleResolver:
    """Parses the ``Accept-Language`` header and returns the best match.

    The resolver picks the language tag with the highest quality value and
    returns it normalized (``en-US`` becomes ``en_US``). When no header is
    present, or every entry is a wildcard or has ``q=0``, it returns
    *default_locale*.
    """

    def __init__(self, default_locale: str = "en") -> None:
        self._default = normalize_locale(default_locale)

    @property
    def default_locale(self) -> str:
        return self._default

    def resolve_locale(self, request: Any) -> str:
        header: str = getattr(request, "accept_language", "") or ""
        if not header:
            headers = getattr(request, "headers", None)
            if headers is not None:
                header = headers.get("accept-language", "")

        if not header:
            return self._default

        return _parse_accept_language(header, self._default)


class FixedLocaleResolver:
    """Always returns a pre-configured locale, ignoring the request."""

    def __init__(self, locale: str = "en") -> None:
        self._locale = normalize_locale(locale)

    def resolve_locale(self, request: Any) -> str:  # noqa: ARG002
        return self._locale


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_accept_language(header: str, default: str) -> str:
    """Return the language tag with the highest *q* value from *header*.

    Handles the standard ``Accept-Language`` format, e.g.
    ``en-US,en;q=0.9,fr;q=0.8``. Ties keep the first tag listed.
    """
    best_locale = default
    best_quality = 0.0

    for part in header.split(","):
        tag, *params = (p.strip() for p in part.split(";"))
        if not tag or tag == "*":
            continue

        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value.strip())
                except ValueError:
                    quality = -1.0
        if quality > best_quality:
            best_quality = quality
            best_locale = normalize_locale(tag)

    return best_locale
