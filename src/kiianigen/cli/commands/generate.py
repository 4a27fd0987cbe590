"""Generate command implementation."""

import json
import logging
import random
from pathlib import Path
from typing import Any, Optional

import click

from kiianigen.exceptions import KiianigenError
from kiianigen.models.config import AppConfig
from kiianigen.services import GenerationService

from ..errors import exit_with_error
from .config import load_app_config

logger = logging.getLogger(__name__)


class JsonValue(click.ParamType):
    """A generator parameter written as a JSON value, e.g. ``[255,0,0]`` or ``7``."""

    name = "json"

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]):
        if not isinstance(value, str):
            return value
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            self.fail(f"{value!r} is not a JSON value ({e.msg})", param, ctx)


JSON_VALUE = JsonValue()


def apply_overrides(app_config: AppConfig, **overrides: Any) -> AppConfig:
    """Copy of the config with every non-None override applied."""
    update = {key: value for key, value in overrides.items() if value is not None}
    return app_config.model_copy(update=update) if update else app_config


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
@click.option(
    '--output-dir',
    '-o',
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help='Directory for the generated config (default: ./json_out)'
)
@click.option(
    '--conf-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Batch file for 'conf' (default: ./kiianiconf.json)"
)
@click.option('--prefix', type=str, default=None, help='Output file name prefix')
@click.option('--author', type=str, default=None, help='Author written into the header')
@click.option(
    '--clipboard/--no-clipboard',
    default=None,
    help='Copy the generated config to the clipboard (macOS only)'
)
@click.option('--seed', type=int, default=None, help='Seed for the random generators')
@click.pass_context
def generate(
    ctx: click.Context,
    name: str,
    params: tuple[Any, ...],
    source: Optional[Path],
    output_dir: Optional[Path],
    conf_file: Optional[Path],
    prefix: Optional[str],
    author: Optional[str],
    clipboard: Optional[bool],
    seed: Optional[int],
):
    """
    Generate animations and write a new device config.

    NAME is a generator name (see 'kiianigen list'), 'all' for every
    generator or 'conf' for the animations listed in the conf file.

    PARAMS are positional generator parameters written as JSON values.

    \b
    Examples:
      kiianigen generate kitt2000
      kiianigen generate kitt2000 '[255,102,0]' null 7
      kiianigen generate keyGroupCycler 24 '[[255,0,0],[0,0,255]]'
      kiianigen generate conf --conf-file ./my-animations.json
    """
    log_path = (ctx.obj or {}).get("log_path")
    app_config = apply_overrides(
        load_app_config(ctx),
        source_dir=source,
        output_dir=output_dir,
        conf_file=conf_file,
        output_prefix=prefix,
        author=author,
        copy_to_clipboard=clipboard,
    )

    rng = random.Random(seed) if seed is not None else None
    service = GenerationService(app_config, rng=rng)

    try:
        result = service.run(name.strip(), list(params))
    except KiianigenError as e:
        logger.error(f"Generation failed: {e.technical_message}")
        exit_with_error(e, log_path)
    except ValueError as e:
        # Output could not be written
        exit_with_error(e, log_path)

    click.echo("\n" + "\n\t".join(result.key_map))
    click.echo(f"\nNew config json has been saved to file: {result.output_path}")
    if result.copied_to_clipboard:
        click.echo("JSON copied to clipboard. Paste away!")

    if result.has_errors:
        click.echo(f"\n{len(result.errors)} animation(s) failed:", err=True)
        for error in result.errors:
            click.echo(f"  - {error}", err=True)
        ctx.exit(1)
