"""Preview command implementation."""

import logging
import random
from pathlib import Path
from typing import Any, Optional

import click

from kiianigen.animation import get_registry
from kiianigen.exceptions import ConfigFileNotFoundError, KiianigenError
from kiianigen.models.geometry import DeviceGeometry
from kiianigen.services import GenerationService

from ..errors import exit_with_error
from .config import load_app_config
from .generate import JSON_VALUE, apply_overrides

logger = logging.getLogger(__name__)


@click.command()
@click.argument('name')
@click.argument('params', nargs=-1, type=JSON_VALUE)
@click.option(
    '--source',
    '-s',
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help='Configurator export directory (default: ../KType-Standard)'
)
@click.option('--seed', type=int, default=None, help='Seed for the random generators')
@click.option('--summary', is_flag=True, help='Only print settings and frame count')
@click.pass_context
def preview(
    ctx: click.Context,
    name: str,
    params: tuple[Any, ...],
    source: Optional[Path],
    seed: Optional[int],
    summary: bool,
):
    """
    Print one animation as JSON without writing any files.

    Uses the device geometry from the configurator export when it is
    available, and the stock KType layout otherwise.
    """
    log_path = (ctx.obj or {}).get("log_path")
    app_config = apply_overrides(load_app_config(ctx), source_dir=source)
    service = GenerationService(app_config)

    try:
        try:
            device_config = service.load_device_config()
            geometry = DeviceGeometry.from_documents(device_config, service.load_pixel_map())
        except ConfigFileNotFoundError as e:
            logger.warning(f"{e.user_message}; previewing with the stock KType layout")
            geometry = DeviceGeometry()

        rng = random.Random(seed) if seed is not None else None
        animation = get_registry().generate(name.strip(), geometry, list(params), rng=rng)
    except KiianigenError as e:
        exit_with_error(e, log_path)

    if summary:
        click.echo(f"settings: {animation.settings}")
        click.echo(f"frames: {animation.frame_count}")
        return

    click.echo(animation.model_dump_json(indent=4))
