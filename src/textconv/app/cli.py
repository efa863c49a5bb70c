"""Command-line interface for textconv."""

from __future__ import annotations

import logging
import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import BinaryIO, TextIO, override

import click

from textconv.config import AppConfig, ConfigError, discover_config_file, load_config
from textconv.core.lines import log_lines
from textconv.core.numeric import NUMBER_KINDS, parse_number
from textconv.core.replace import replace_all
from textconv.utils.formatting import format_bytes, format_count, format_interval
from textconv.utils.logging import setup_logging

logger = logging.getLogger(__name__)

try:
    __version__ = version("textconv")
except PackageNotFoundError:
    __version__ = "unknown"


class StrictNumber(click.ParamType):
    """Click parameter type backed by the strict numeric parsers."""

    def __init__(self, kind: str) -> None:
        if kind not in NUMBER_KINDS:
            raise ValueError(f"Unknown number kind: {kind!r}")
        self.kind: str = kind
        self.name: str = kind

    @override
    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> int | float:
        # Defaults arrive already converted
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value

        parsed = parse_number(self.kind, value if isinstance(value, str) else None)
        if parsed is None:
            self.fail(f"{value!r} is not a valid {self.kind} value", param, ctx)
        return parsed


def validate_config_path(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: Path | None,
) -> Path | None:
    """Reject directories and non-YAML configuration paths."""
    if value is None:
        return value

    if value.exists() and value.is_dir():
        raise click.BadParameter('Configuration path must be a file, not a directory')

    valid_extensions = {'.yaml', '.yml'}
    if value.suffix.lower() not in valid_extensions:
        extensions_str = ", ".join(sorted(valid_extensions))
        raise click.BadParameter(
            f'Invalid configuration file extension. Supported extensions: {extensions_str}'
        )

    return value


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Normalize the log level to upper case and check it."""
    if value is None:
        return value

    normalized_value = value.upper().strip()

    valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
    if normalized_value not in valid_levels:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(sorted(valid_levels))}'
        )

    return normalized_value


def _config(ctx: click.Context) -> AppConfig:
    config = ctx.find_object(AppConfig)
    return config if config is not None else AppConfig()


@click.group()
@click.option(
    '--config', '-c',
    type=click.Path(path_type=Path),
    default=None,
    callback=validate_config_path,
    help='Configuration file path (.yaml or .yml). If not specified, searches for textconv.yaml in standard locations.'
)
@click.option(
    '--log-level', '-l',
    type=str,
    default=None,
    callback=validate_log_level,
    help='Logging verbosity level (DEBUG, INFO, WARNING, ERROR, CRITICAL)'
)
@click.version_option(version=__version__, prog_name='textconv')
@click.pass_context
def cli(ctx: click.Context, config: Path | None, log_level: str | None) -> None:
    """textconv - strict number parsing and human-readable rendering.

    Examples:

        # Check that a value fits in a signed 16-bit integer
        textconv parse int16 1234

        # Render a byte count
        textconv bytes 17179869184

        # Replace every occurrence of a substring in a file
        textconv replace foo bar input.txt
    """
    config_path = config if config is not None else discover_config_file()

    try:
        app_config = load_config(config_path)
        if log_level is not None:
            app_config.logging.level = log_level
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    _ = setup_logging(app_config.logging)
    ctx.obj = app_config


@cli.command()
@click.argument('kind', type=click.Choice(NUMBER_KINDS))
@click.argument('value')
def parse(kind: str, value: str) -> None:
    """Parse VALUE strictly as a KIND number and print it.

    Negative values must follow "--", as in: textconv parse int32 -- -5
    """
    parsed = parse_number(kind, value)
    if parsed is None:
        raise click.ClickException(f"invalid {kind} value: {value!r}")
    click.echo(repr(parsed) if isinstance(parsed, float) else str(parsed))


@cli.command(name='bytes')
@click.argument('count', type=StrictNumber('uint64'))
@click.pass_context
def bytes_command(ctx: click.Context, count: int) -> None:
    """Render COUNT bytes in binary units."""
    click.echo(format_bytes(count, size=_config(ctx).formatting.buffer_size))


@cli.command(name='count')
@click.argument('number', type=StrictNumber('uint64'))
@click.pass_context
def count_command(ctx: click.Context, number: int) -> None:
    """Render an item count."""
    click.echo(format_count(number, size=_config(ctx).formatting.buffer_size))


@cli.command()
@click.argument('millisecs', type=StrictNumber('uint64'))
@click.option(
    '--aligned/--no-aligned',
    default=None,
    help='Right-align the leading number (default from configuration)'
)
@click.pass_context
def interval(ctx: click.Context, millisecs: int, aligned: bool | None) -> None:
    """Render a duration given in MILLISECS."""
    settings = _config(ctx).formatting
    align = aligned if aligned is not None else settings.aligned_intervals
    click.echo(format_interval(millisecs, size=settings.buffer_size, aligned=align))


@cli.command()
@click.argument('pattern')
@click.argument('replacement')
@click.argument('source', type=click.File('rb'), default='-')
def replace(pattern: str, replacement: str, source: BinaryIO) -> None:
    """Replace every PATTERN with REPLACEMENT in SOURCE (default: stdin).

    SOURCE is processed as raw bytes, so line endings and any encoding pass
    through unchanged.
    """
    if not pattern:
        raise click.UsageError('PATTERN must not be empty')

    data = source.read()
    result = replace_all(data, os.fsencode(pattern), os.fsencode(replacement))
    if result is None:
        raise click.ClickException('replacement failed, see log for details')
    click.echo(result, nl=False)


@cli.command()
@click.argument('source', type=click.File('r'), default='-')
@click.option('--error', '-e', is_flag=True, help='Log lines at ERROR instead of INFO')
@click.option(
    '--max-lines', '-n',
    type=StrictNumber('uint32'),
    default=None,
    help='Maximum number of lines to emit (default from configuration)'
)
@click.pass_context
def lines(ctx: click.Context, source: TextIO, error: bool, max_lines: int | None) -> None:
    """Log each non-empty line of SOURCE (default: stdin)."""
    settings = _config(ctx).lines
    limit = max_lines if max_lines is not None else settings.max_lines

    emitted = log_lines(
        source.read(),
        error=error,
        logger=logging.getLogger(settings.logger_name),
        max_lines=limit,
    )
    logger.debug("Emitted %d line(s) with limit %d", emitted, limit)
    click.echo(f"{emitted} line(s) emitted")
