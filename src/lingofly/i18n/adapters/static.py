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
"""Static message source — messages registered in code."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from lingofly.i18n.catalog import MessageCatalog
from lingofly.i18n.formatting import format_message
from lingofly.kernel.exceptions import MessageNotFoundError


class StaticMessageSource:
    """MessageSource over in-memory dictionaries.

    Handy for tests and small tools::

        source = StaticMessageSource({
            None: {"hello.name": "Hello {0}"},
            "de": {"hello.name": "Hallo {0}"},
        })
        source.get_message("hello.name", ("Ada",), "de")   # "Hallo Ada"
    """

    def __init__(
        self,
        messages: Mapping[str | None, Mapping[str, str]],
        default_locale: str = "en",
        fallback_to_default_locale: bool = True,
    ) -> None:
        self._catalog = MessageCatalog.load(
            messages,
            default_locale=default_locale,
            fallback_to_default_locale=fallback_to_default_locale,
        )

    @property
    def catalog(self) -> MessageCatalog:
        return self._catalog

    def get_message(
        self,
        code: str,
        args: Sequence[Any] = (),
        locale: str | None = None,
    ) -> str:
        return format_message(self._catalog.lookup(locale, code), args)

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
