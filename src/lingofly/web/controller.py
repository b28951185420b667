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
"""Demo greeting endpoints."""

from __future__ import annotations

import structlog
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route

from lingofly.i18n.resolver import MessageResolver

logger = structlog.get_logger("lingofly.demo")

API_PREFIX = "/api/v1"


class HelloController:
    """Greets the caller in the language of their ``Accept-Language`` header.

    Every endpoint writes one log line in the configured log locale and
    returns its response body in the request locale.

    Handlers are plain functions. Starlette runs them in its threadpool,
    which is where a lookup-triggered catalog reload is allowed to block.
    """

    def __init__(self, resolver: MessageResolver) -> None:
        self._resolver = resolver

    def routes(self) -> list[Route]:
        # /hello/multi must be registered before the /hello/{name} catch-all
        return [
            Route(f"{API_PREFIX}/hello", self.hello, methods=["GET"]),
            Route(f"{API_PREFIX}/hello/multi", self.hello_multi_arg, methods=["GET"]),
            Route(f"{API_PREFIX}/hello/{{name}}", self.hello_single_arg, methods=["GET"]),
        ]

    def hello(self, request: Request) -> PlainTextResponse:
        logger.info(self._resolver.get_log_message("hello.world.log"))
        return PlainTextResponse(self._resolver.message_for_request(request, "hello.world"))

    def hello_single_arg(self, request: Request) -> PlainTextResponse:
        name = request.path_params["name"]
        logger.info(self._resolver.resolve_for_log("hello.name.log", (name,)))
        return PlainTextResponse(self._resolver.message_for_request(request, "hello.name", name))

    def hello_multi_arg(self, request: Request) -> PlainTextResponse:
        name, age, city = "John", 30, "Oakland"
        logger.info(self._resolver.resolve_for_log("hello.multi.log", (name, age, city)))
        return PlainTextResponse(self._resolver.message_for_request(request, "hello.multi", name, str(age), city))
