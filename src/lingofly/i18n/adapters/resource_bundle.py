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
"""Resource-bundle message source — loads messages from locale-specific files."""

from __future__ import annotations

import importlib.resources
import re
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import structlog

from lingofly.i18n.catalog import MessageCatalog
from lingofly.i18n.formatting import format_message
from lingofly.i18n.locale import normalize_locale
from lingofly.i18n.parsers import PARSERS
from lingofly.kernel.exceptions import CatalogLoadError, MessageNotFoundError

logger = structlog.get_logger("lingofly.i18n")

_LOCALE_SUFFIX_RE = re.compile(r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]+)*$")

CLASSPATH_PREFIX = "classpath:"


def resolve_basename(basename: str | Path, base_dir: str | Path | None = None) -> Path:
    """Turn a configured basename into a filesystem path prefix.

    ``classpath:i18n/messages`` points inside the bundled
    ``lingofly.resources`` package. Relative paths are resolved against
    *base_dir* when one is given.
    """
    text = str(basename)
    if text.startswith(CLASSPATH_PREFIX):
        relative = text[len(CLASSPATH_PREFIX) :].lstrip("/")
        return Path(str(importlib.resources.files("lingofly.resources"))) / relative
    path = Path(text)
    if base_dir is not None and not path.is_absolute():
        path = Path(base_dir) / path
    return path


class ResourceBundleMessageSource:
    """Resolves messages from locale-specific resource files.

    File naming convention, for ``basename="i18n/messages"``::

        i18n/messages.properties        default (root) set
        i18n/messages_de.properties     German
        i18n/messages_de_AT.yaml        Austrian German

    ``.properties``, ``.yaml``, ``.yml`` and ``.json`` are recognised; when
    a locale has several, the first in that order wins. The catalog is
    built eagerly, so a missing or malformed default set fails construction
    with :class:`CatalogLoadError`.

    With ``cache_duration > 0`` the files are re-read once the catalog is
    older than that many seconds. The rebuilt catalog replaces the old one
    in a single assignment; a failed reload keeps serving the previous
    catalog.

    The reload runs synchronously inside whichever lookup notices the
    expiry. Async callers should look messages up from a worker thread
    (plain ``def`` Starlette endpoints already run in the threadpool) so a
    slow filesystem does not block the event loop.
    """

    def __init__(
        self,
        basename: str | Path = "i18n/messages",
        encoding: str = "utf-8",
        default_locale: str = "en",
        cache_duration: float = 0,
        fallback_to_default_locale: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._basename = resolve_basename(basename)
        self._encoding = encoding
        self._default_locale = normalize_locale(default_locale)
        self._cache_duration = cache_duration
        self._fallback = fallback_to_default_locale
        self._clock = clock

        self._catalog = self._build_catalog()
        self._loaded_at = self._clock()

    # ------------------------------------------------------------------
    # Public API (MessageSource protocol)
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> MessageCatalog:
        self._refresh_if_stale()
        return self._catalog

    def get_message(
        self,
        code: str,
        args: Sequence[Any] = (),
        locale: str | None = None,
    ) -> str:
        """Resolve *code* for *locale*, substituting positional *args*.

        Raises ``MessageNotFoundError`` when the code is not in the
        requested locale chain nor in the default set.
        """
        return format_message(self.catalog.lookup(locale, code), args)

    def get_message_or_default(
        self,
        code: str,
        default: str,
        args: Sequence[Any] = (),
        locale: str | None = None,
    ) -> str:
        try:
            return self.get_message(code, args, locale)
        except MessageNotFoundError:
            return format_message(default, args)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @property
    def basename(self) -> Path:
        return self._basename

    def reload(self) -> MessageCatalog:
        """Re-read every resource file and swap in the new catalog."""
        catalog = self._build_catalog()
        self._catalog = catalog
        self._loaded_at = self._clock()
        return catalog

    def discover(self) -> dict[str | None, Path]:
        """Map each locale (``None`` for the root set) to its resource file."""
        directory = self._basename.parent
        prefix = self._basename.name
        if not directory.is_dir():
            return {}

        priority = list(PARSERS)
        found: dict[str | None, Path] = {}
        for path in sorted(directory.glob(f"{prefix}*")):
            if not path.is_file() or path.suffix not in PARSERS:
                continue
            stem = path.name[: -len(path.suffix)]
            if stem == prefix:
                locale: str | None = None
            elif stem.startswith(f"{prefix}_") and len(stem) > len(prefix) + 1:
                locale = stem[len(prefix) + 1 :]
                if not _LOCALE_SUFFIX_RE.match(locale):
                    logger.warning("message_bundle_ignored", path=str(path))
                    continue
            else:
                continue
            current = found.get(locale)
            if current is None or priority.index(path.suffix) < priority.index(current.suffix):
                found[locale] = path
        return found

    def _build_catalog(self) -> MessageCatalog:
        files = self.discover()
        tags = {normalize_locale(tag) for tag in files if tag is not None}
        if None not in files and self._default_locale not in tags:
            raise CatalogLoadError(
                f"No default resource set found for basename '{self._basename}'",
                origin=str(self._basename),
                locale=self._default_locale,
            )

        sources = {locale: self._read(path, locale) for locale, path in files.items()}
        catalog = MessageCatalog.load(
            sources,
            default_locale=self._default_locale,
            fallback_to_default_locale=self._fallback,
        )
        logger.info(
            "message_catalog_loaded",
            basename=str(self._basename),
            locales=catalog.locales,
            codes=len(catalog),
        )
        return catalog

    def _read(self, path: Path, locale: str | None) -> dict[str, str]:
        try:
            text = path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogLoadError(
                f"Cannot read resource set '{path}': {exc}",
                origin=str(path),
                locale=locale,
            ) from exc
        return PARSERS[path.suffix](text.removeprefix("\ufeff"), str(path))

    def _refresh_if_stale(self) -> None:
        if self._cache_duration <= 0:
            return
        now = self._clock()
        if now - self._loaded_at < self._cache_duration:
            return
        self._loaded_at = now
        try:
            self._catalog = self._build_catalog()
        except CatalogLoadError as exc:
            logger.error(
                "message_catalog_reload_failed",
                basename=str(self._basename),
                error=str(exc),
            )
