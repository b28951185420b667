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
"""'lingofly run' — serve the greeting demo with uvicorn."""

from __future__ import annotations

from pathlib import Path

import click
import uvicorn
from rich.markup import escape

from lingofly.cli.console import console
from lingofly.config.properties.server import ServerProperties
from lingofly.core.config import Config
from lingofly.kernel.exceptions import CatalogLoadError
from lingofly.web.app import create_app_from_config


@click.command()
@click.option("--host", default=None, help="Bind address (default: from lingofly.yaml).")
@click.option("--port", default=None, type=int, help="Port number (default: from lingofly.yaml or 8080).")
@click.option(
    "--base-dir",
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding lingofly.yaml and relative bundles.",
)
@click.option("--profile", "profiles", multiple=True, help="Active config profile (repeatable).")
def run_command(host: str | None, port: int | None, base_dir: Path, profiles: tuple[str, ...]) -> None:
    """Start the demo HTTP server."""
    server = Config.from_sources(base_dir, active_profiles=list(profiles)).bind(ServerProperties)

    try:
        app = create_app_from_config(base_dir, active_profiles=list(profiles))
    except CatalogLoadError as exc:
        console.print(f"[error]Invalid message catalog:[/error] {escape(str(exc))}")
        raise SystemExit(1) from exc

    uvicorn.run(
        app,
        host=host or server.host,
        port=port or server.port,
        log_level=server.log_level,
    )
