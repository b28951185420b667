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
"""I18n subsystem wiring from configuration."""

from __future__ import annotations

from pathlib import Path

from lingofly.config.properties.messages import MessagesProperties
from lingofly.core.config import Config
from lingofly.i18n.adapters.resource_bundle import ResourceBundleMessageSource, resolve_basename
from lingofly.i18n.locale import AcceptHeaderLocaleResolver
from lingofly.i18n.resolver import MessageResolver


class I18nAutoConfiguration:
    """Builds the message source, locale resolver and resolver facade.

    Relative ``lingofly.messages.basename`` values are resolved against
    *base_dir*, which defaults to the current working directory.
    """

    def __init__(self, config: Config, base_dir: str | Path | None = None) -> None:
        self._properties = config.bind(MessagesProperties)
        self._base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    @property
    def properties(self) -> MessagesProperties:
        return self._properties

    def message_source(self) -> ResourceBundleMessageSource:
        props = self._properties
        return ResourceBundleMessageSource(
            basename=resolve_basename(props.basename, self._base_dir),
            encoding=props.encoding,
            default_locale=props.default_locale,
            cache_duration=props.cache_duration,
            fallback_to_default_locale=props.fallback_to_default_locale,
        )

    def locale_resolver(self) -> AcceptHeaderLocaleResolver:
        return AcceptHeaderLocaleResolver(default_locale=self._properties.default_locale)

    def message_resolver(self) -> MessageResolver:
        return MessageResolver(
            self.message_source(),
            log_locale=self._properties.log_locale,
            locale_resolver=self.locale_resolver(),
        )
