"""Config command implementations."""

from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from kiianigen.exceptions import wrap_pydantic_error
from kiianigen.models.config import DEFAULT_CONFIG_PATH, AppConfig

from ..errors import exit_with_error


def config_path(ctx: click.Context) -> Path:
    """Config file chosen on the command line, or the default location."""
    path = (ctx.obj or {}).get("config_file")
    return path if path is not None else DEFAULT_CONFIG_PATH


def load_app_config(ctx: click.Context) -> AppConfig:
    """Load the app config, exiting with a friendly message when it is invalid."""
    path = config_path(ctx)
    try:
        return AppConfig.load_or_default(path)
    except ValidationError as e:
        exit_with_error(wrap_pydantic_error(e, str(path)), (ctx.obj or {}).get("log_path"))
    except ValueError as e:
        exit_with_error(e, (ctx.obj or {}).get("log_path"))


@click.group(name="config")
def config():
    """Show or create the kiianigen configuration."""
    pass


@config.command(name="show")
@click.option('--field', '-f', type=str, default=None, help='Show a single field')
@click.pass_context
def show(ctx: click.Context, field: Optional[str]):
    """Display the current configuration."""
    app_config = load_app_config(ctx)
    path = config_path(ctx)

    if field is not None:
        if field not in AppConfig.model_fields:
            raise click.BadParameter(
                f"Unknown field '{field}'. Valid fields: {', '.join(AppConfig.model_fields)}",
                param_hint="--field",
            )
        click.echo(app_config.model_dump(mode="json")[field])
        return

    source = path if path.exists() else f"{path} (not saved, showing defaults)"
    click.echo(f"Configuration: {source}\n")
    for name, value in app_config.model_dump(mode="json").items():
        click.echo(f"  {name}: {value}")


@config.command(name="init")
@click.option('--force', is_flag=True, help='Overwrite an existing config file')
@click.pass_context
def init(ctx: click.Context, force: bool):
    """Write a config file with the default settings."""
    path = config_path(ctx)
    if path.exists() and not force:
        click.echo(f"Config file already exists: {path}")
        click.echo("Use --force to overwrite it with the defaults.")
        return

    try:
        AppConfig().save(path)
    except ValueError as e:
        exit_with_error(e, (ctx.obj or {}).get("log_path"))
    click.echo(f"Wrote default configuration to {path}")
