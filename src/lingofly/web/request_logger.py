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
"""Request logging middleware — pure ASGI, logs method, path, locale, status and duration."""

from __future__ import annotations

import time
from typing import Any

import structlog
from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from lingofly.i18n.locale import LocaleResolver

logger = structlog.get_logger("lingofly.web")


class RequestLoggingMiddleware:
    """Logs each HTTP request together with the locale it resolved to."""

    def __init__(self, app: ASGIApp, locale_resolver: LocaleResolver) -> None:
        self.app = app
        self._locale_resolver = locale_resolver

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive, send)
        locale = self._locale_resolver.resolve_locale(request)
        start = time.perf_counter()
        status_code = 500

        async def send_with_logging(message: Any) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_with_logging)
        except Exception as exc:
            logger.error(
                "http_request_failed",
                method=request.method,
                path=request.url.path,
                locale=locale,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise

        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            locale=locale,
            status_code=status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
