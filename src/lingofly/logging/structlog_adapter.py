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
"""structlog setup driven by :class:`LoggingProperties`."""

from __future__ import annotations

import logging
import sys

import structlog

from lingofly.config.properties.logging import LoggingProperties


class StructlogAdapter:
    """Routes structlog through the stdlib root logger.

    ``format="json"`` renders one JSON object per line; ``console`` uses
    structlog's coloured dev renderer. Per-logger levels from the
    properties are applied after the root logger is set up.
    """

    def __init__(self) -> None:
        self._properties = LoggingProperties()

    @property
    def properties(self) -> LoggingProperties:
        return self._properties

    def configure(self, properties: LoggingProperties) -> None:
        self._properties = properties
        self._setup_structlog()
        for name, level in properties.module_levels.items():
            self.set_level(name, level)

    def set_level(self, name: str, level: str) -> None:
        """Set the level of one stdlib logger; unknown names mean INFO."""
        logging.getLogger(name).setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))

    def _setup_structlog(self) -> None:
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]
        if self._properties.format == "json":
            processors.append(structlog.processors.format_exc_info)
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=self._properties.root_level,
            force=True,
        )
