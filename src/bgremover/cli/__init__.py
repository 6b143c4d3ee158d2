"""Command-line-interface for the Background Remover.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

import click

from bgremover.version import get_version

from . import remove
from .gui import gui_cli


@click.group()
@click.version_option(version=get_version(), prog_name="bgremover")
def main_cli():
    """Remove image backgrounds through a remote service."""
    pass


main_cli.add_command(remove.remove_cli, "remove")
main_cli.add_command(gui_cli, "gui")
