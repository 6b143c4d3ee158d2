"""Contains `bgremover remove` CLI implementation.

For licensing see accompanying LICENSE file.
Copyright (C) 2025 Apple Inc. All Rights Reserved.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from bgremover.config_manager import build_endpoint, get_config_manager
from bgremover.i18n import get_translator
from bgremover.service.client import (
    BackgroundRemovalError,
    ServiceError,
    remove_background,
)
from bgremover.session.validation import FileValidationError, load_selection
from bgremover.utils import io
from bgremover.utils import logging as logging_utils

LOGGER = logging.getLogger(__name__)


@click.command()
@click.argument(
    "input_path",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
)
@click.option(
    "-o",
    "--output-path",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory to save the result in. Defaults to the configured download folder.",
)
@click.option(
    "--service-url",
    type=str,
    default=None,
    help="Base URL of the background removal service.",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Request timeout in seconds.",
)
@click.option("-v", "--verbose", is_flag=True, help="Activate debug logs.")
def remove_cli(
    input_path: Path,
    output_path: Path | None,
    service_url: str | None,
    timeout: float | None,
    verbose: bool,
):
    """Remove the background of INPUT_PATH and save the result as PNG."""
    logging_utils.configure(logging.DEBUG if verbose else logging.INFO)

    config = get_config_manager()
    translator = get_translator()
    translator.set_language(config.get_language(), notify=False)

    endpoint = build_endpoint(service_url) if service_url else config.get_endpoint()
    request_timeout = timeout if timeout is not None else config.get_request_timeout()
    output_dir = output_path or config.get_download_directory()

    try:
        selected = load_selection(input_path)
    except FileValidationError as exc:
        raise click.ClickException(translator.translate(exc.key)) from exc

    try:
        result = remove_background(
            endpoint,
            selected.content,
            selected.name,
            selected.mime_type,
            timeout=request_timeout,
        )
    except ServiceError as exc:
        raise click.ClickException(exc.message or translator.translate("error.processing")) from exc
    except BackgroundRemovalError as exc:
        LOGGER.debug("Transport failure: %s", exc)
        raise click.ClickException(translator.translate("error.processing")) from exc

    try:
        data = io.decode_data_url(result.image)
    except ValueError as exc:
        raise click.ClickException(translator.translate("error.processing_failed")) from exc

    target = io.write_bytes(data, output_dir / io.download_filename())
    LOGGER.info("Saved result to %s", target)
    click.echo(str(target))
