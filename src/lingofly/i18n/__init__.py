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
"""LingoFly I18n — message catalogs, locale resolution and the resolver facade.

Import concrete adapter types from the adapter package::

    from lingofly.i18n.adapters.resource_bundle import ResourceBundleMessageSource
"""

from lingofly.i18n.catalog import MessageCatalog
from lingofly.i18n.formatting import format_message
from lingofly.i18n.locale import (
    AcceptHeaderLocaleResolver,
    FixedLocaleResolver,
    LocaleResolver,
    normalize_locale,
)
from lingofly.i18n.ports.outbound import MessageSource
from lingofly.i18n.resolver import MessageResolver

__all__ = [
    "AcceptHeaderLocaleResolver",
    "FixedLocaleResolver",
    "LocaleResolver",
    "MessageCatalog",
    "MessageResolver",
    "MessageSource",
    "format_message",
    "normalize_locale",
]
