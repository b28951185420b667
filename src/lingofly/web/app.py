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
"""Starlette application factory for the greeting demo."""

from __future__ import annotations

from pathlib import Path

import structlog
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import Route

from lingofly.config.properties.logging import LoggingProperties
from lingofly.core.config import Config
from lingofly.i18n.auto_configuration import I18nAutoConfiguration
from lingofly.i18n.resolver import MessageResolver
from lingofly.kernel.exceptions import LingoFlyException, MessageNotFoundError
from lingofly.logging.structlog_adapter import StructlogAdapter
from lingofly.web.controller import HelloController
from lingofly.web.errors import lingofly_exception_handler, message_not_found_handler
from lingofly.web.request_logger import RequestLoggingMiddleware

logger = structlog.get_logger("lingofly.web")


def create_app(
    resolver: MessageResolver,
    debug: bool = False,
    extra_routes: list[Route] | None = None,
) -> Starlette:
    """Create the demo application around an already-built *resolver*.

    Includes:
    - request logging with the resolved locale
    - the ``/api/v1/hello`` endpoints
    - JSON error responses for missing messages and other LingoFly errors
    """
    routes = HelloController(resolver).routes()
    if extra_routes:
        routes.extend(extra_routes)

    app = Starlette(
        debug=debug,
        routes=routes,
        middleware=[Middleware(RequestLoggingMiddleware, locale_resolver=resolver.locale_resolver)],
    )
    app.state.resolver = resolver
    app.add_exception_handler(MessageNotFoundError, message_not_found_handler)
    app.add_exception_handler(LingoFlyException, lingofly_exception_handler)
    return app


def create_app_from_config(
    base_dir: str | Path | None = None,
    active_profiles: list[str] | None = None,
) -> Starlette:
    """Composition root: load config, set up logging, build the catalog and app.

    Raises ``CatalogLoadError`` before any route is served when the message
    bundles are invalid.
    """
    base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
    config = Config.from_sources(base_dir, active_profiles=active_profiles)
    StructlogAdapter().configure(config.bind(LoggingProperties))
    logger.info("config_loaded", sources=config.loaded_sources, profiles=active_profiles or [])
    resolver = I18nAutoConfiguration(config, base_dir=base_dir).message_resolver()
    return create_app(resolver)
