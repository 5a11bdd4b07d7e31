#!/usr/bin/env python3
"""
CLI for running the learning platform API server.

Starts uvicorn on the configured host and port and serves until it receives
a shutdown signal. ``--reload`` enables the development hot-reload mode,
restarting the server whenever a source file changes.
"""

import logging

import click
import uvicorn

logger = logging.getLogger(__name__)

APP_IMPORT_PATH = "learning_platform.api.app:app"


@click.command()
@click.option(
    "--host",
    envvar="HOST",
    default="0.0.0.0",
    show_default=True,
    help="Interface to bind (defaults to HOST env var)",
)
@click.option(
    "--port",
    envvar="PORT",
    default=8080,
    type=int,
    show_default=True,
    help="Port to listen on (defaults to PORT env var)",
)
@click.option(
    "--reload/--no-reload",
    envvar="RELOAD",
    default=False,
    help="Restart the server when source files change",
)
@click.option(
    "--log-level",
    envvar="LOG_LEVEL",
    default="info",
    type=click.Choice(
        ["critical", "error", "warning", "info", "debug", "trace"],
        case_sensitive=False,
    ),
    show_default=True,
    help="Uvicorn log level (defaults to LOG_LEVEL env var)",
)
def main(host: str, port: int, reload: bool, log_level: str) -> None:
    """Run the learning platform API server."""
    click.echo(f"Serving {APP_IMPORT_PATH} on http://{host}:{port}")
    if reload:
        click.echo("Hot reload enabled")

    logger.info(
        "Starting API server",
        extra={"host": host, "port": port, "reload": reload},
    )
    uvicorn.run(
        APP_IMPORT_PATH,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()
