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
"""Logging configuration properties."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lingofly.core.config import config_properties

ROOT_LOGGER = "root"


@config_properties(prefix="lingofly.logging")
class LoggingProperties(BaseModel):
    """Configuration for log output (lingofly.logging.*).

    ``level`` maps logger names to level names; the ``root`` entry sets the
    root logger. A bare string (``LINGOFLY_LOGGING_LEVEL=debug``) is taken
    as the root level.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: Literal["console", "json"] = "console"
    level: dict[str, str] = Field(default_factory=lambda: {ROOT_LOGGER: "INFO"})

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_levels(cls, v: Any) -> Any:
        if v is None:
            return {ROOT_LOGGER: "INFO"}
        if isinstance(v, str):
            v = {ROOT_LOGGER: v}
        if not isinstance(v, dict):
            return v
        known = logging.getLevelNamesMapping()
        levels: dict[str, str] = {}
        for name, value in v.items():
            level = str(value).upper()
            if level not in known:
                raise ValueError(f"unknown log level '{value}' for logger '{name}'")
            levels[str(name)] = level
        return levels

    @property
    def root_level(self) -> str:
        return self.level.get(ROOT_LOGGER, "INFO")

    @property
    def module_levels(self) -> dict[str, str]:
        """Per-logger levels, without the root entry."""
        return {name: level for name, level in self.level.items() if name != ROOT_LOGGER}
