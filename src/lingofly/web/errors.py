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
"""Exception handlers turning LingoFly errors into JSON responses."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import structlog
from starlette.requests import Request
from starlette.responses import JSONResponse

from lingofly.i18n.resolver import MessageResolver
from lingofly.kernel.exceptions import LingoFlyException, MessageNotFoundError

logger = structlog.get_logger("lingofly.web")

MISSING_MESSAGE_CODE = "error.message.missing"
MISSING_MESSAGE_DEFAULT = "Internal message missing"


def _error_body(request: Request, message: str, code: str, status: int) -> dict[str, Any]:
    return {
        "error": {
            "message": message,
            "code": code,
            "timestamp": datetime.now(UTC).isoformat(),
            "status": status,
            "path": request.url.path,
        }
    }


async def message_not_found_handler(request: Request, exc: MessageNotFoundError) -> JSONResponse:
    """A handler asked for a code no catalog defines: a server-side fault.

    The client gets a localized generic message; the missing code only goes
    to the log.
    """
    resolver: MessageResolver = request.app.state.resolver
    logger.error(
        "message_code_missing",
        message_code=exc.message_code,
        locale=exc.locale,
        path=request.url.path,
    )
    locale = resolver.locale_resolver.resolve_locale(request)
    message = resolver.get_message_or_default(MISSING_MESSAGE_CODE, MISSING_MESSAGE_DEFAULT, locale=locale)
    return JSONResponse(_error_body(request, message, exc.code or "MESSAGE_NOT_FOUND", 500), status_code=500)


async def lingofly_exception_handler(request: Request, exc: LingoFlyException) -> JSONResponse:
    logger.error("request_failed", path=request.url.path, error=str(exc), error_type=type(exc).__name__)
    return JSONResponse(
        _error_body(request, "Internal server error", exc.code or type(exc).__name__, 500),
        status_code=500,
    )
