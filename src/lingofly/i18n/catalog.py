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
"""MessageCatalog — immutable (locale, code) -> template mapping."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from lingofly.i18n.formatting import validate_template
from lingofly.i18n.locale import ROOT_LOCALE, candidate_locales, normalize_locale
from lingofly.kernel.exceptions import CatalogLoadError, MessageNotFoundError


class MessageCatalog:
    """Per-locale message templates with a designated default set.

    Build instances with :meth:`load`. A catalog is never mutated after
    construction, so one instance can be shared by any number of concurrent
    readers without locking.

    Lookup walks the candidate chain of the requested locale (full tag,
    then primary language subtag, see
    :func:`~lingofly.i18n.locale.candidate_locales`) and finally the
    default set::

        de_AT  ->  de  ->  default

    Locales with no resource set at all always resolve against the default
    set. When ``fallback_to_default_locale`` is off, a supported locale
    whose sets lack the code raises :class:`MessageNotFoundError` instead
    of falling back.
    """

    __slots__ = ("_bundles", "_default", "_default_locale", "_fallback")

    def __init__(
        self,
        bundles: Mapping[str, Mapping[str, str]],
        default: Mapping[str, str],
        default_locale: str,
        fallback_to_default_locale: bool,
    ) -> None:
        self._bundles = MappingProxyType({k: MappingProxyType(dict(v)) for k, v in bundles.items()})
        self._default = MappingProxyType(dict(default))
        self._default_locale = default_locale
        self._fallback = fallback_to_default_locale

    @classmethod
    def load(
        cls,
        sources: Mapping[str | None, Mapping[str, str]],
        default_locale: str = "en",
        fallback_to_default_locale: bool = True,
    ) -> MessageCatalog:
        """Build a catalog from already-parsed resource sets.

        *sources* maps a locale tag to its ``{code: template}`` entries; the
        key ``None`` (or ``""``) is the root set. The default set is the
        root set, or the set registered under *default_locale* when there
        is no root set.

        Raises:
            CatalogLoadError: the default set is missing, two keys normalize
                to the same locale, or a template has an unterminated
                placeholder.
        """
        default_locale = normalize_locale(default_locale)
        bundles: dict[str, Mapping[str, str]] = {}
        for tag, entries in sources.items():
            locale = normalize_locale(tag)
            if locale in bundles:
                raise CatalogLoadError(
                    f"More than one resource set for locale '{locale or 'root'}'",
                    locale=locale,
                )
            _validate_entries(locale, entries)
            bundles[locale] = entries

        if ROOT_LOCALE in bundles:
            default = bundles.pop(ROOT_LOCALE)
        elif default_locale in bundles:
            default = bundles[default_locale]
        else:
            raise CatalogLoadError(
                f"Default resource set for locale '{default_locale}' is missing",
                locale=default_locale,
            )

        return cls(bundles, default, default_locale, fallback_to_default_locale)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, locale: str | None, code: str) -> str:
        """Return the template for *code* in *locale*, applying fallback."""
        candidates = candidate_locales(locale)
        supported = False
        for candidate in candidates:
            bundle = self._bundles.get(candidate)
            if bundle is None:
                continue
            supported = True
            template = bundle.get(code)
            if template is not None:
                return template

        if supported and not self._fallback and self._default_locale not in candidates:
            raise MessageNotFoundError(code, normalize_locale(locale))

        template = self._default.get(code)
        if template is None:
            raise MessageNotFoundError(code, normalize_locale(locale) or self._default_locale)
        return template

    def contains(self, code: str, locale: str | None = None) -> bool:
        """Return whether :meth:`lookup` would find *code* for *locale*."""
        try:
            self.lookup(locale, code)
        except MessageNotFoundError:
            return False
        return True

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def fallback_to_default_locale(self) -> bool:
        return self._fallback

    @property
    def locales(self) -> list[str]:
        """Locales with their own resource set, sorted, default first."""
        others = sorted(loc for loc in self._bundles if loc != self._default_locale)
        return [self._default_locale, *others]

    def codes(self, locale: str | None = None) -> frozenset[str]:
        """Codes defined by the default set, or by *locale*'s own set."""
        if locale is None:
            return frozenset(self._default)
        tag = normalize_locale(locale)
        bundle = self._bundles.get(tag)
        if bundle is None:
            return frozenset(self._default) if tag == self._default_locale else frozenset()
        return frozenset(bundle)

    def __len__(self) -> int:
        return len(self._default)

    def __repr__(self) -> str:
        return f"MessageCatalog(default_locale={self._default_locale!r}, locales={self.locales!r}, codes={len(self)})"


def _validate_entries(locale: str, entries: Mapping[str, str]) -> None:
    for code, template in entries.items():
        try:
            validate_template(template)
        except ValueError as exc:
            raise CatalogLoadError(
                f"Malformed template for code '{code}' in locale '{locale or 'root'}': {exc}",
                locale=locale,
            ) from exc
