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
"""LingoFly CLI — inspect message bundles and run the demo server."""

from __future__ import annotations

import click

from lingofly.cli.console import print_banner


class LingoFlyCLI(click.Group):
    """Click group that shows the LingoFly banner on help."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)


@click.group(cls=LingoFlyCLI)
@click.version_option(package_name="lingofly")
def cli() -> None:
    """LingoFly — localized message resolution demo."""


from lingofly.cli.check import check_command  # noqa: E402
from lingofly.cli.run import run_command  # noqa: E402

cli.add_command(check_command, name="check")
cli.add_command(run_command, name="run")
