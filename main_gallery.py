"""Mini README: Entry point CLI for the AR model gallery.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port, and production flags, and prints the catalogue of
stored models straight from disk. Settings come from ``ARGALLERY_*``
environment variables when options are omitted.
"""

from __future__ import annotations

import typer
import uvicorn

from argallery.catalogue import AssetService
from argallery.configuration import get_settings
from argallery.logging_utils import configure_root_logger
from argallery.storage import AssetStore

cli = typer.Typer(help="Launch and inspect the AR model gallery.")

_WILDCARD_HOSTS = {"0.0.0.0", "::"}


def browser_url(host: str, port: int) -> str:
    """Return a URL a browser can open for a server bound to ``host``."""

    return f"http://{'127.0.0.1' if host in _WILDCARD_HOSTS else host}:{port}"


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Disable auto-reload and uvicorn access logs."
    ),
) -> None:
    """Serve the gallery with uvicorn."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    bind_host = host or settings.interface_host
    bind_port = port or settings.interface_port
    stored = AssetStore(
        settings.models_directory, extension=settings.asset_extension
    ).list_filenames()

    typer.echo(f"Serving {len(stored)} model(s) from {settings.models_directory}")
    typer.echo(f"Gallery: {browser_url(bind_host, bind_port)}")
    if bind_host in _WILDCARD_HOSTS:
        typer.echo("Listening on all interfaces; other devices can use this machine's IP.")
    uvicorn.run(
        "argallery.interface.web_app:create_application",
        host=bind_host,
        port=bind_port,
        factory=True,
        reload=not production,
        access_log=not production,
        log_level=settings.log_level.lower(),
    )


@cli.command("list-models")
def list_models() -> None:
    """Print every stored model with its category and description."""

    settings = get_settings()
    service = AssetService(
        AssetStore(settings.models_directory, extension=settings.asset_extension)
    )
    result = service.enumerate_assets()
    if not result.success:
        typer.echo(result.message, err=True)
        raise typer.Exit(code=1)
    if not result.models:
        typer.echo("No models uploaded.")
        return
    for record in result.models:
        typer.echo(f"{record.filename}\t{record.name}\t{record.category}\t{record.description}")


if __name__ == "__main__":
    cli()
