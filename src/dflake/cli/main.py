"""CLI commands for dflake."""

import json
import logging
import sys
from pathlib import Path

import click

from dflake.config import Settings
from dflake.datetime_support import to_datetime
from dflake.decoder import SnowflakeDecoder
from dflake.exceptions import DflakeError
from dflake.models import Dflake
from dflake.validator import SnowflakeValidator

logger = logging.getLogger(__name__)


def _load_settings(config_path: Path | None, log_level: str | None) -> Settings:
    if config_path is not None:
        settings = Settings.from_toml(config_path)
    else:
        settings = Settings.find_and_load()

    if log_level is not None:
        settings = Settings(**{**settings.model_dump(), "log_level": log_level})
    return settings


def _flake_to_json(flake: Dflake, created_at: str) -> dict:
    return {**flake.as_dict(), "datetime": created_at}


@click.group()
@click.version_option(package_name="dflake")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to dflake.toml (default: search upwards from cwd)",
)
@click.option("--log-level", help="Logging level (default: WARNING)")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """dflake - decode Discord snowflakes into timestamp, worker, process and increment."""
    try:
        settings = _load_settings(config_path, log_level)
    except ValueError as e:
        # pydantic ValidationError and TOMLDecodeError are ValueErrors
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@cli.command()
@click.argument("snowflakes", nargs=-1, required=True)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--epoch", type=click.IntRange(min=0), help="Epoch in Unix milliseconds")
@click.pass_obj
def decode(
    settings: Settings,
    snowflakes: tuple[str, ...],
    output_json: bool,
    epoch: int | None,
) -> None:
    """Decode snowflake(s) into components."""
    if epoch is not None:
        decoder = SnowflakeDecoder(epoch=epoch)
    else:
        decoder = settings.make_decoder()

    try:
        flakes = decoder.decode_many(snowflakes)
    except DflakeError as e:
        logger.debug(f"Rejected input {snowflakes!r}: {e!r}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        created = [to_datetime(flake).isoformat() for flake in flakes]
    except (ValueError, OverflowError, OSError) as e:
        click.echo(f"Error: timestamp out of range: {e}", err=True)
        sys.exit(1)

    if output_json or settings.output == "json":
        items = [_flake_to_json(flake, at) for flake, at in zip(flakes, created)]
        click.echo(json.dumps(items, indent=2))
        return

    for flake, at in zip(flakes, created):
        click.echo(f"Snowflake: {flake.raw}")
        click.echo(f"  timestamp:  {flake.timestamp} ({at})")
        click.echo(f"  worker_id:  {flake.worker_id}")
        click.echo(f"  process_id: {flake.process_id}")
        click.echo(f"  increment:  {flake.increment}")


@cli.command()
@click.argument("snowflake")
@click.option("--quiet", "-q", is_flag=True, help="Only output result (0=valid, 1=invalid)")
@click.pass_obj
def validate(settings: Settings, snowflake: str, quiet: bool) -> None:
    """Validate snowflake format."""
    validator = SnowflakeValidator(settings.make_decoder())

    result = validator.validate(snowflake)

    if quiet:
        sys.exit(0 if result.valid else 1)

    if result.valid:
        click.echo(f"✓ Valid snowflake: {snowflake}")
        sys.exit(0)
    else:
        logger.debug(f"Rejected input {snowflake!r}: {result.kind}")
        click.echo(f"✗ Invalid snowflake: {result.error}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
