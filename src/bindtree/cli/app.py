import sys
from typing import Optional

import typer
from loguru import logger
from pydantic import ValidationError

from bindtree.config import get_config


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import bindtree

        typer.echo(f"bindtree version: {bindtree.__version__}")
        raise typer.Exit()


app = typer.Typer(name="bindtree", no_args_is_help=True)


@app.callback()
def app_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level for stderr output (defaults to BINDTREE_LOG_LEVEL or WARNING).",
    ),
) -> None:
    """bindtree - parse, normalize and inspect binding notation."""
    try:
        config = get_config()
    except ValidationError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    level = (log_level or config.log_level).upper()
    try:
        logger.level(level)
    except ValueError:
        typer.echo(f"Invalid log level: {level}", err=True)
        raise typer.Exit(1)

    # The library never installs sinks; the CLI owns stderr
    logger.remove()
    logger.add(sys.stderr, level=level)
