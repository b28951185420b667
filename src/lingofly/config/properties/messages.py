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
"""Message source configuration properties."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from lingofly.core.config import config_properties


@config_properties(prefix="lingofly.messages")
class MessagesProperties(BaseModel):
    """Configuration for message resolution (lingofly.messages.*)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    basename: str = "classpath:i18n/messages"
    encoding: str = "utf-8"
    cache_duration: float = Field(default=0, ge=0)
    fallback_to_default_locale: bool = True
    default_locale: str = "en"
    log_locale: str = "en"
