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
"""'lingofly check' — load the message catalog and report what it contains."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from lingofly.cli.console import console
from lingofly.core.config import Config
from lingofly.i18n.formatting import placeholder_indexes
from lingofly.i18n.auto_configuration import I18nAutoConfiguration
from lingofly.kernel.exceptions import CatalogLoadError


@click.command()
@click.option("--basename", default=None, help="Resource-set prefix (default: from lingofly.yaml).")
@click.option(
    "--base-dir",
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding lingofly.yaml and relative bundles.",
)
@click.option("--profile", "profiles", multiple=True, help="Active config profile (repeatable).")
def check_command(basename: str | None, base_dir: Path, profiles: tuple[str, ...]) -> None:
    """Validate message bundles and list their locales."""
    config = Config.from_sources(base_dir, active_profiles=list(profiles))
    if basename is not None:
        config = config.merged({"lingofly": {"messages": {"basename": basename}}})

    try:
        source = I18nAutoConfiguration(config, base_dir=base_dir).message_source()
    except CatalogLoadError as exc:
        console.print(f"[error]Invalid message catalog:[/error] {escape(str(exc))}")
        raise SystemExit(1) from exc

    catalog = source.catalog
    default_codes = catalog.codes()

    table = Table(title=escape(f"Message bundles — {source.basename}"))
    table.add_column("Locale", style="info")
    table.add_column("Codes", justify="right")
    table.add_column("Falls back", justify="right")
    for locale in catalog.locales:
        own = catalog.codes(locale)
        if locale == catalog.default_locale:
            table.add_row(f"{locale} (default)", str(len(own)), "-")
            continue
        table.add_row(locale, str(len(own)), str(len(default_codes - own)))
    console.print(table)

    unknown = {
        locale: sorted(catalog.codes(locale) - default_codes)
        for locale in catalog.locales
        if locale != catalog.default_locale
    }
    for locale, codes in unknown.items():
        if codes:
            console.print(f"[warning]{locale}:[/warning] codes not defined by the default set: {', '.join(codes)}")

    for locale in catalog.locales:
        if locale == catalog.default_locale:
            continue
        for code in sorted(catalog.codes(locale) & default_codes):
            expected = placeholder_indexes(catalog.lookup(catalog.default_locale, code))
            actual = placeholder_indexes(catalog.lookup(locale, code))
            if actual != expected:
                console.print(
                    f"[warning]{locale}:[/warning] {escape(code)} uses placeholders {escape(str(sorted(actual)))}, "
                    f"the default set uses {escape(str(sorted(expected)))}"
                )

    console.print("[success]Catalog OK[/success]")
