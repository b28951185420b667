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
"""Tests for the greeting demo application."""

from __future__ import annotations

import inspect
from pathlib import Path

import pytest
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from lingofly.i18n.adapters.resource_bundle import ResourceBundleMessageSource
from lingofly.i18n.adapters.static import StaticMessageSource
from lingofly.i18n.resolver import MessageResolver
from lingofly.kernel.exceptions import CatalogLoadError
from lingofly.web.app import create_app, create_app_from_config
from lingofly.web.controller import HelloController

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _missing_code_handler(request: Request) -> PlainTextResponse:
    resolver: MessageResolver = request.app.state.resolver
    return PlainTextResponse(resolver.message_for_request(request, "no.such.code"))


class RecordingLogger:
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.fields: list[dict] = []

    def info(self, event: str, **kw) -> None:
        self.lines.append(event)
        self.fields.append(kw)


@pytest.fixture
def client() -> TestClient:
    source = ResourceBundleMessageSource(basename="classpath:i18n/messages")
    app = create_app(
        MessageResolver(source, log_locale="en"),
        extra_routes=[Route("/broken", _missing_code_handler)],
    )
    return TestClient(app)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


class TestHelloEndpoints:
    def test_hello_default_locale(self, client):
        resp = client.get("/api/v1/hello")
        assert resp.status_code == 200
        assert resp.text == "Hello World!"

    def test_hello_german(self, client):
        resp = client.get("/api/v1/hello", headers={"Accept-Language": "de-DE,de;q=0.9,en;q=0.8"})
        assert resp.text == "Hallo Welt!"

    def test_hello_unsupported_language_falls_back(self, client):
        resp = client.get("/api/v1/hello", headers={"Accept-Language": "ja"})
        assert resp.text == "Hello World!"

    def test_hello_name(self, client):
        assert client.get("/api/v1/hello/Ada").text == "Hello Ada"

    def test_hello_name_spanish(self, client):
        resp = client.get("/api/v1/hello/Ada", headers={"Accept-Language": "es"})
        assert resp.text == "Hola Ada"

    def test_hello_multi(self, client):
        resp = client.get("/api/v1/hello/multi")
        assert resp.text == "Hello John, you are 30 years old and you live in Oakland"

    def test_hello_multi_german(self, client):
        resp = client.get("/api/v1/hello/multi", headers={"Accept-Language": "de"})
        assert resp.text == "Hallo John, du bist 30 Jahre alt und wohnst in Oakland"


class TestErrors:
    def test_missing_message_is_server_error(self, client):
        resp = client.get("/broken")
        assert resp.status_code == 500
        body = resp.json()["error"]
        assert body["code"] == "MESSAGE_NOT_FOUND"
        assert body["message"] == "Internal message missing"
        assert body["path"] == "/broken"
        assert "no.such.code" not in resp.text

    def test_missing_message_is_localized(self, client):
        resp = client.get("/broken", headers={"Accept-Language": "de"})
        assert resp.json()["error"]["message"] == "Interne Nachricht fehlt"

    def test_missing_message_uses_default_text_when_uncatalogued(self):
        resolver = MessageResolver(StaticMessageSource({None: {"hello.world": "Hi"}}))
        app = create_app(resolver, extra_routes=[Route("/broken", _missing_code_handler)])
        resp = TestClient(app).get("/broken")
        assert resp.status_code == 500
        assert resp.json()["error"]["message"] == "Internal message missing"


class TestCreateAppFromConfig:
    def test_uses_bundled_messages(self, tmp_path: Path):
        client = TestClient(create_app_from_config(tmp_path))
        resp = client.get("/api/v1/hello/Ada", headers={"Accept-Language": "de"})
        assert resp.text == "Hallo Ada"

    def test_project_bundles(self, tmp_path: Path):
        (tmp_path / "lingofly.yaml").write_text("lingofly:\n  messages:\n    basename: texts/messages\n")
        (tmp_path / "texts").mkdir()
        (tmp_path / "texts" / "messages.properties").write_text(
            "hello.world=Howdy!\nhello.world.log=called\n", encoding="utf-8"
        )
        client = TestClient(create_app_from_config(tmp_path))
        assert client.get("/api/v1/hello").text == "Howdy!"

    def test_invalid_bundles_fail_at_startup(self, tmp_path: Path):
        (tmp_path / "lingofly.yaml").write_text("lingofly:\n  messages:\n    basename: absent/messages\n")
        with pytest.raises(CatalogLoadError):
            create_app_from_config(tmp_path)

    def test_invalid_log_level_fails_at_startup(self, tmp_path: Path):
        (tmp_path / "lingofly.yaml").write_text("lingofly:\n  logging:\n    level:\n      root: chatty\n")
        with pytest.raises(ValueError, match="LoggingProperties"):
            create_app_from_config(tmp_path)

    def test_logs_loaded_config_sources(self, tmp_path: Path, monkeypatch):
        (tmp_path / "lingofly.yaml").write_text("lingofly:\n  app:\n    name: demo\n")
        recorder = RecordingLogger()
        monkeypatch.setattr("lingofly.web.app.logger", recorder)
        create_app_from_config(tmp_path)
        assert recorder.lines == ["config_loaded"]
        assert str(tmp_path / "lingofly.yaml") in recorder.fields[0]["sources"]


class TestLogLocale:
    def test_log_line_ignores_request_language(self, client, monkeypatch):
        recorder = RecordingLogger()
        monkeypatch.setattr("lingofly.web.controller.logger", recorder)

        german = client.get("/api/v1/hello/Ada", headers={"Accept-Language": "de"})
        english = client.get("/api/v1/hello/Ada", headers={"Accept-Language": "en"})

        assert german.text == "Hallo Ada"
        assert english.text == "Hello Ada"
        assert recorder.lines == [
            "Endpoint /hello/<name> was called with name Ada",
            "Endpoint /hello/<name> was called with name Ada",
        ]

    def test_multi_log_line_in_log_locale(self, client, monkeypatch):
        recorder = RecordingLogger()
        monkeypatch.setattr("lingofly.web.controller.logger", recorder)
        client.get("/api/v1/hello/multi", headers={"Accept-Language": "de"})
        assert recorder.lines == ["Endpoint /hello/multi was called with John, 30 and Oakland"]


class TestThreadpoolHandlers:
    def test_endpoints_are_synchronous(self):
        resolver = MessageResolver(StaticMessageSource({None: {"hello.world": "Hi"}}))
        for route in HelloController(resolver).routes():
            assert not inspect.iscoroutinefunction(route.endpoint)
