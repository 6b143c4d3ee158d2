"""CLI command to launch GUI.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

import logging

import click

from bgremover.utils import logging as logging_utils


@click.command()
@click.option("-v", "--verbose", is_flag=True, help="Activate debug logs.")
def gui_cli(verbose: bool):
    """Launch the Background Remover GUI application."""
    logging_utils.configure(logging.DEBUG if verbose else logging.INFO)

    from bgremover.gui.main_window import BackgroundRemoverGUI

    app = BackgroundRemoverGUI()
    app.mainloop()
