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
"""MessageResolver — the facade HTTP handlers and loggers call into."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from lingofly.i18n.locale import AcceptHeaderLocaleResolver, LocaleResolver, normalize_locale
from lingofly.i18n.ports.outbound import MessageSource


class MessageResolver:
    """Turns ``(locale, code, args)`` into the final user- or log-facing text.

    Request messages are resolved in the locale passed by the caller; log
    messages always use the *log_locale* fixed at construction, so log
    output stays in one language whatever the clients ask for.

    Args:
        message_source: Backend doing lookup and substitution.
        log_locale: Locale used by :meth:`resolve_for_log` and
            :meth:`get_log_message`.
        locale_resolver: Extracts a locale from an inbound request for
            :meth:`message_for_request`. Defaults to the ``Accept-Language``
            header with the catalog's default locale as fallback.
    """

    def __init__(
        self,
        message_source: MessageSource,
        log_locale: str = "en",
        locale_resolver: LocaleResolver | None = None,
    ) -> None:
        self._source = message_source
        self._log_locale = normalize_locale(log_locale)
        self._locale_resolver = locale_resolver or AcceptHeaderLocaleResolver(
            message_source.catalog.default_locale
        )

    @property
    def log_locale(self) -> str:
        return self._log_locale

    @property
    def message_source(self) -> MessageSource:
        return self._source

    @property
    def locale_resolver(self) -> LocaleResolver:
        return self._locale_resolver

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_for_request(self, locale: str | None, code: str, args: Sequence[Any] = ()) -> str:
        """Resolve *code* in *locale* and substitute *args* positionally.

        ``MessageNotFoundError`` from the message source propagates as is.
        """
        return self._source.get_message(code, tuple(args), locale)

    def resolve_for_log(self, code: str, args: Sequence[Any] = ()) -> str:
        """Resolve *code* in the configured log locale."""
        return self._source.get_message(code, tuple(args), self._log_locale)

    # ------------------------------------------------------------------
    # Facade entry points
    # ------------------------------------------------------------------

    def get_message(self, code: str, *args: Any, locale: str | None) -> str:
        return self.resolve_for_request(locale, code, args)

    def get_message_or_default(self, code: str, default: str, *args: Any, locale: str | None) -> str:
        return self._source.get_message_or_default(code, default, args, locale)

    def get_log_message(self, code: str) -> str:
        """Log-locale template for *code*; placeholders are left for the caller."""
        return self.resolve_for_log(code)

    def message_for_request(self, request: Any, code: str, *args: Any) -> str:
        """Resolve *code* in the locale the :class:`LocaleResolver` reads from *request*."""
        return self.get_message(code, *args, locale=self._locale_resolver.resolve_locale(request))
