"""Web server command."""

import click

from ..config import settings


@click.command()
@click.option("--host", default=settings.HOST, help=f"Host to bind to (default: {settings.HOST})")
@click.option(
    "--port", "-p", default=settings.PORT, type=int, help=f"Port to bind to (default: {settings.PORT})"
)
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: str, port: int, reload: bool):
    """Start the web API server.

    All data is kept in memory and reset to the sample records on every start.

    Examples:

        # Start on default port (8000)
        pt-manager serve

        # Start on custom port
        pt-manager serve --port 3000

        # Development mode with auto-reload
        pt-manager serve --reload
    """
    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting pt-manager web server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo(f"  Docs:    http://{host}:{port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "pt_manager.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
