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
"""Tests for ResourceBundleMessageSource — discovery, loading and reload."""

from __future__ import annotations

from pathlib import Path

import pytest

from lingofly.i18n.adapters.resource_bundle import ResourceBundleMessageSource, resolve_basename
from lingofly.i18n.ports.outbound import MessageSource
from lingofly.kernel.exceptions import CatalogLoadError, MessageNotFoundError


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    i18n = tmp_path / "i18n"
    i18n.mkdir()
    (i18n / "messages.properties").write_text(
        "hello.world=Hello World!\nhello.name=Hello {0}\nonly.default=Default only\n",
        encoding="utf-8",
    )
    (i18n / "messages_de.properties").write_text(
        "hello.world=Hallo Welt!\nhello.name=Hallo {0}\n",
        encoding="utf-8",
    )
    (i18n / "messages_es.yaml").write_text("hello:\n  world: ¡Hola Mundo!\n", encoding="utf-8")
    return i18n


def _source(bundle_dir: Path, **kwargs) -> ResourceBundleMessageSource:
    return ResourceBundleMessageSource(basename=bundle_dir / "messages", **kwargs)


class TestConformance:
    def test_implements_message_source(self, bundle_dir):
        assert isinstance(_source(bundle_dir), MessageSource)


class TestDiscovery:
    def test_finds_root_and_locales(self, bundle_dir):
        files = _source(bundle_dir).discover()
        assert set(files) == {None, "de", "es"}
        assert files["es"].suffix == ".yaml"

    def test_properties_preferred_over_json(self, bundle_dir):
        (bundle_dir / "messages_de.json").write_text('{"hello": {"world": "JSON"}}', encoding="utf-8")
        source = _source(bundle_dir)
        assert source.discover()["de"].suffix == ".properties"
        assert source.get_message("hello.world", locale="de") == "Hallo Welt!"

    def test_ignores_other_basenames_and_extensions(self, bundle_dir):
        (bundle_dir / "errors_fr.properties").write_text("x=y", encoding="utf-8")
        (bundle_dir / "messages_fr.txt").write_text("x=y", encoding="utf-8")
        (bundle_dir / "messagesfr.properties").write_text("x=y", encoding="utf-8")
        assert set(_source(bundle_dir).discover()) == {None, "de", "es"}

    def test_non_locale_suffix_ignored(self, bundle_dir):
        (bundle_dir / "messages_backup.properties").write_text("hello.world=stale", encoding="utf-8")
        (bundle_dir / "messages_de.old.properties").write_text("hello.world=stale", encoding="utf-8")
        source = _source(bundle_dir)
        assert set(source.discover()) == {None, "de", "es"}
        assert "backup" not in source.catalog.locales
        assert source.get_message("hello.world", locale="de") == "Hallo Welt!"

    def test_region_file(self, bundle_dir):
        (bundle_dir / "messages_de_AT.properties").write_text("hello.world=Servus!", encoding="utf-8")
        source = _source(bundle_dir)
        assert source.get_message("hello.world", locale="de-AT") == "Servus!"
        assert source.get_message("hello.name", ("Ada",), "de-AT") == "Hallo Ada"


class TestLoading:
    def test_missing_default_set_fails(self, bundle_dir):
        (bundle_dir / "messages.properties").unlink()
        with pytest.raises(CatalogLoadError, match="No default resource set"):
            _source(bundle_dir)

    def test_missing_directory_fails(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            ResourceBundleMessageSource(basename=tmp_path / "nowhere" / "messages")

    def test_default_locale_file_counts_as_default(self, tmp_path):
        (tmp_path / "messages_en.properties").write_text("hello.world=Hi", encoding="utf-8")
        source = ResourceBundleMessageSource(basename=tmp_path / "messages", default_locale="en")
        assert source.get_message("hello.world", locale="fr") == "Hi"

    def test_duplicate_code_fails(self, bundle_dir):
        (bundle_dir / "messages.properties").write_text("a=1\na=2\n", encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="duplicate code"):
            _source(bundle_dir)

    def test_duplicate_code_in_yaml_default_fails(self, tmp_path):
        (tmp_path / "messages.yaml").write_text("hello.world: Hi\nhello.world: Hey\n", encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="duplicate code"):
            ResourceBundleMessageSource(basename=tmp_path / "messages")

    def test_duplicate_code_in_json_default_fails(self, tmp_path):
        (tmp_path / "messages.json").write_text('{"a": "1", "a": "2"}', encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="duplicate code"):
            ResourceBundleMessageSource(basename=tmp_path / "messages")

    def test_yaml_templates_kept_verbatim(self, tmp_path):
        (tmp_path / "messages.yaml").write_text("answer:\n  no: No\n  on: on\nversion: 1.10\n", encoding="utf-8")
        source = ResourceBundleMessageSource(basename=tmp_path / "messages")
        codes = ["answer.no", "version", "answer.on"]
        assert [source.get_message(code) for code in codes] == ["No", "1.10", "on"]

    def test_malformed_default_fails(self, bundle_dir):
        (bundle_dir / "messages.properties").write_text("hello.name=Hello {0\n", encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="Malformed template"):
            _source(bundle_dir)

    def test_undecodable_file_fails(self, bundle_dir):
        (bundle_dir / "messages_de.properties").write_bytes("hello.world=Grüße".encode("utf-16"))
        with pytest.raises(CatalogLoadError, match="Cannot read"):
            _source(bundle_dir)

    def test_custom_encoding(self, tmp_path):
        (tmp_path / "messages.properties").write_bytes("hello.world=Grüße".encode("latin-1"))
        source = ResourceBundleMessageSource(basename=tmp_path / "messages", encoding="latin-1")
        assert source.get_message("hello.world") == "Grüße"


class TestGetMessage:
    def test_requested_locale(self, bundle_dir):
        assert _source(bundle_dir).get_message("hello.name", ("Ada",), "de") == "Hallo Ada"

    def test_yaml_locale(self, bundle_dir):
        assert _source(bundle_dir).get_message("hello.world", locale="es") == "¡Hola Mundo!"

    def test_falls_back_to_default(self, bundle_dir):
        assert _source(bundle_dir).get_message("hello.name", ("Ada",), "es") == "Hello Ada"

    def test_unknown_locale_matches_default(self, bundle_dir):
        source = _source(bundle_dir)
        assert source.get_message("hello.name", ("Ada",), "ko") == source.get_message("hello.name", ("Ada",), "en")

    def test_unknown_code_raises(self, bundle_dir):
        with pytest.raises(MessageNotFoundError):
            _source(bundle_dir).get_message("no.such.code", ("x",), "de")

    def test_fallback_disabled(self, bundle_dir):
        source = _source(bundle_dir, fallback_to_default_locale=False)
        with pytest.raises(MessageNotFoundError):
            source.get_message("only.default", locale="de")

    def test_get_message_or_default(self, bundle_dir):
        source = _source(bundle_dir)
        assert source.get_message_or_default("no.such.code", "Fallback {0}", ("x",), "de") == "Fallback x"
        assert source.get_message_or_default("hello.name", "Fallback {0}", ("x",), "de") == "Hallo x"


class TestReload:
    def test_no_reload_without_cache_duration(self, bundle_dir):
        clock = FakeClock()
        source = _source(bundle_dir, clock=clock)
        (bundle_dir / "messages.properties").write_text("hello.world=Changed\n", encoding="utf-8")
        clock.now = 10_000
        assert source.get_message("hello.world") == "Hello World!"

    def test_reloads_after_cache_duration(self, bundle_dir):
        clock = FakeClock()
        source = _source(bundle_dir, cache_duration=60, clock=clock)
        first = source.catalog
        (bundle_dir / "messages.properties").write_text("hello.world=Changed\n", encoding="utf-8")

        clock.now = 30
        assert source.get_message("hello.world") == "Hello World!"
        assert source.catalog is first

        clock.now = 61
        assert source.get_message("hello.world") == "Changed"
        assert source.catalog is not first

    def test_failed_reload_keeps_previous_catalog(self, bundle_dir):
        clock = FakeClock()
        source = _source(bundle_dir, cache_duration=5, clock=clock)
        (bundle_dir / "messages.properties").unlink()
        clock.now = 10
        assert source.get_message("hello.world") == "Hello World!"

    def test_explicit_reload(self, bundle_dir):
        source = _source(bundle_dir)
        (bundle_dir / "messages_fr.properties").write_text("hello.world=Bonjour", encoding="utf-8")
        catalog = source.reload()
        assert "fr" in catalog.locales
        assert source.get_message("hello.world", locale="fr") == "Bonjour"


class TestResolveBasename:
    def test_classpath_points_into_package(self):
        path = resolve_basename("classpath:i18n/messages")
        assert path.name == "messages"
        assert (path.parent / "messages.properties").is_file()

    def test_relative_against_base_dir(self, tmp_path):
        assert resolve_basename("i18n/messages", tmp_path) == tmp_path / "i18n" / "messages"

    def test_absolute_unchanged(self, tmp_path):
        absolute = tmp_path / "x" / "messages"
        assert resolve_basename(absolute, Path("/elsewhere")) == absolute

    def test_bundled_messages_load(self):
        source = ResourceBundleMessageSource(basename="classpath:i18n/messages")
        assert source.get_message("hello.name", ("Ada",), "de") == "Hallo Ada"
        assert source.catalog.locales == ["en", "de", "es"]


class TestByteOrderMark:
    def test_utf8_bom_is_ignored(self, tmp_path):
        (tmp_path / "messages.properties").write_bytes("\ufeffhello.world=Hi".encode("utf-8"))
        source = ResourceBundleMessageSource(basename=tmp_path / "messages")
        assert source.get_message("hello.world") == "Hi"
