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
"""LingoFly exception hierarchy."""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class LingoFlyException(Exception):
    """Base exception for all LingoFly errors.

    Carries an optional error code and context dict for structured error data.
    Catch LingoFlyException to handle every error raised by the library, or
    catch a specific subclass for targeted handling.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CATALOG_LOAD").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Message Exceptions
# =============================================================================


class CatalogLoadError(LingoFlyException):
    """A message catalog could not be built.

    Raised at startup when the default resource set is missing or unreadable,
    or when any resource set contains a duplicate code or malformed
    placeholder syntax. The application should not start serving with an
    invalid catalog.
    """

    def __init__(
        self,
        message: str,
        origin: str | None = None,
        locale: str | None = None,
    ) -> None:
        context: dict = {}
        if origin is not None:
            context["origin"] = origin
        if locale is not None:
            context["locale"] = locale
        super().__init__(message, code="CATALOG_LOAD", context=context)
        self.origin = origin
        self.locale = locale


class MessageNotFoundError(LingoFlyException, LookupError):
    """No template exists for a message code, even after fallback."""

    def __init__(self, message_code: str, locale: str | None = None) -> None:
        where = f" in locale '{locale}'" if locale else ""
        super().__init__(
            f"No message found for code '{message_code}'{where}",
            code="MESSAGE_NOT_FOUND",
            context={"message_code": message_code, "locale": locale},
        )
        self.message_code = message_code
        self.locale = locale
