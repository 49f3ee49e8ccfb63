#!/usr/bin/env python3
"""
Client registry command line.

    python run.py serve [--host H] [--port P] [--reload]
    python run.py config
    python run.py info

-v / -d before the command raise the log level to INFO / DEBUG.
"""

import sys
from pathlib import Path

import click
import uvicorn
import yaml

PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from client_registry.core.config import get_app_config, get_server_address
from client_registry.core.logging import get_logger, setup_logging

logger = get_logger("run")

APP_IMPORT_PATH = "client_registry.main:app"


def _log_level(verbose: bool, debug: bool) -> str:
    if debug:
        return "DEBUG"
    return "INFO" if verbose else "WARNING"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log at INFO level.")
@click.option("-d", "--debug", is_flag=True, help="Log at DEBUG level.")
def cli(verbose: bool, debug: bool) -> None:
    """In-memory client registry: serve the API or inspect its setup."""
    if not (PROJECT_ROOT / ".project_root").is_file():
        raise click.ClickException(f"{PROJECT_ROOT} is not the project root (.project_root missing)")
    setup_logging(level=_log_level(verbose, debug), format_type="console")


@cli.command()
@click.option("--host", help="Bind address. Defaults to the configured host.")
@click.option("--port", type=int, help="Bind port. Defaults to the configured port.")
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API under uvicorn."""
    address = get_server_address()
    host = host or address.host
    port = port or address.port

    logger.info("Starting server", extra={"host": host, "port": port, "reload": reload})
    click.echo(f"Serving on http://{host}:{port} (Ctrl+C to stop)")
    uvicorn.run(APP_IMPORT_PATH, host=host, port=port, reload=reload, log_config=None)


@cli.command("config")
def show_config() -> None:
    """Print the validated YAML configuration."""
    try:
        app_config = get_app_config()
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(
        yaml.safe_dump(
            {
                "application": app_config.application.model_dump(),
                "logging": app_config.logging.model_dump(),
            },
            sort_keys=False,
            allow_unicode=True,
        )
    )


@cli.command()
def info() -> None:
    """Print the service identity and its HTTP routes."""
    from client_registry.main import create_app

    application = get_app_config().application
    click.echo(f"{application.name} {application.version} ({application.environment})")
    if application.description:
        click.echo(application.description)

    click.echo("\nRoutes:")
    for path, operations in create_app().openapi()["paths"].items():
        for method in operations:
            click.echo(f"  {method.upper():<7} {path}")


if __name__ == "__main__":
    cli()
