"""
CLI for the SearchScape MCP server.

Commands:
- serve: Start the MCP server
- info: Show configuration
- fetch: Run a single fetch-image call
- transform: Fetch (optionally) and transform an image in one process
"""

import asyncio

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import settings
from .logging import setup_logging

TRANSPORTS = ("stdio", "http", "sse")

app = typer.Typer(
    name="searchscape",
    help="MCP server for fetching and transforming images",
)
console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """SearchScape - MCP server for Unsplash images and Hugging Face filters."""
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, json_output=settings.log_json, log_file=settings.log_file)
    logger.debug("CLI initialized with log level: {}", log_level)


@app.command()
def serve(
    transport: str = typer.Option(
        settings.transport, "--transport", "-t", help="Transport: stdio, http or sse"
    ),
    host: str = typer.Option(settings.host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to bind to"),
):
    """Start the MCP server."""
    from .server import mcp

    if transport not in TRANSPORTS:
        console.print(f"[red]Error: unknown transport '{transport}'[/]")
        raise typer.Exit(1)

    if not settings.unsplash_access_key:
        logger.warning("UNSPLASH_ACCESS_KEY not set - fetch-image will fail")
        console.print("[red]Warning: UNSPLASH_ACCESS_KEY not set. fetch-image will fail.[/]")
    if not settings.hugging_face_api_key:
        logger.warning("HUGGING_FACE_API_KEY not set - transform-image will fail")
        console.print(
            "[red]Warning: HUGGING_FACE_API_KEY not set. transform-image will fail.[/]"
        )

    if transport == "stdio":
        logger.info("Starting MCP server on stdio")
        console.print("[bold blue]SearchScape MCP Server running on stdio[/]")
        mcp.run(transport="stdio")
        return

    logger.info("Starting MCP server ({}) on {}:{}", transport, host, port)
    console.print("[bold blue]Starting SearchScape MCP Server[/]")
    console.print(f"Host: {host}:{port}")
    if transport == "http":
        console.print(f"MCP endpoint: http://{host}:{port}/mcp")
        mcp.run(transport="http", host=host, port=port, path="/mcp")
    else:
        mcp.run(transport="sse", host=host, port=port)


@app.command()
def info():
    """Show configuration."""
    logger.debug("Displaying configuration")
    console.print("[bold blue]SearchScape Configuration[/]")

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row(
        "Unsplash Access Key", "***" if settings.unsplash_access_key else "[red]NOT SET[/]"
    )
    table.add_row("Unsplash API URL", settings.unsplash_api_url)
    table.add_row(
        "Hugging Face API Key", "***" if settings.hugging_face_api_key else "[red]NOT SET[/]"
    )
    table.add_row("Hugging Face Inference URL", settings.hf_inference_url)
    table.add_row("HTTP Timeout", f"{settings.http_timeout}s")
    table.add_row("Session Store", settings.session_store_type)
    table.add_row("Transport", settings.transport)
    table.add_row("Server Host", settings.host)
    table.add_row("Server Port", str(settings.port))

    console.print(table)

    from .providers import FILTERS

    filters = Table(title="Filters")
    filters.add_column("Filter", style="cyan")
    filters.add_column("Model", style="green")
    for image_filter in FILTERS.values():
        filters.add_row(image_filter.name, image_filter.model)
    console.print(filters)


def _print_result(result) -> None:
    if result.is_error:
        console.print(f"[red]{result.text}[/]")
        raise typer.Exit(1)
    console.print(f"[green]{result.text}[/]")


@app.command()
def fetch(
    prompt: str = typer.Argument(..., help="Describe the image to fetch"),
    user_id: str = typer.Option("cli", "--user-id", "-u", help="User session ID"),
):
    """Fetch an image from Unsplash for a prompt."""
    from .server import get_dispatcher

    logger.info("CLI fetch: prompt='{}', user_id={}", prompt[:50], user_id)
    result = asyncio.run(get_dispatcher().fetch_image(prompt=prompt, user_id=user_id))
    _print_result(result)


@app.command()
def transform(
    filter_name: str = typer.Argument(..., metavar="FILTER", help="Filter to apply"),
    user_id: str = typer.Option("cli", "--user-id", "-u", help="User session ID"),
    prompt: str | None = typer.Option(
        None, "--prompt", help="Fetch an image for this prompt before transforming"
    ),
):
    """Transform an image, fetching one first when --prompt is given."""
    from .server import get_dispatcher

    dispatcher = get_dispatcher()

    async def run_transform():
        if prompt:
            fetched = await dispatcher.fetch_image(prompt=prompt, user_id=user_id)
            if fetched.is_error:
                return fetched
            console.print(fetched.text)
        return await dispatcher.transform_image(filter_name=filter_name, user_id=user_id)

    logger.info("CLI transform: filter='{}', user_id={}", filter_name, user_id)
    _print_result(asyncio.run(run_transform()))


if __name__ == "__main__":
    app()
