#!/usr/bin/env python3
"""
Portfolio Site CLI

Builds the portfolio site, validates its content and previews it locally.

Commands:
    build   - Build the site with the configured adapter
    check   - Validate site configuration and content without writing output
    routes  - List the routes that would be built
    preview - Serve the built site (static) or the per-request app (serverless)

Examples:\n

    build_site.py build                                   # Build to FOLIO_OUTPUT_PATH (dist/)

    build_site.py build --adapter serverless              # Build for the serverless adapter

    build_site.py build --site-url https://example.com    # Override the public URL

    build_site.py check                                   # Validate content only

    build_site.py preview --port 4321                     # Serve the site locally
"""

import os
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Optional
from wsgiref.simple_server import make_server

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.content import ContentLoadError, InvalidRecordError, load_content
from folio.contexts.rendering import RenderError, build_site, collect_routes, create_app
from folio.contexts.site import Adapter, Integration, SiteConfigError, load_site_config
from folio.utils.logger import setup_logger
from folio.utils.timestamp import now

load_dotenv()
OUTPUT_PATH = Path(os.getenv("FOLIO_OUTPUT_PATH", "dist"))
LOGS_PATH = Path(os.getenv("FOLIO_LOGS_PATH", "outs/logs"))

CONTENT_ERRORS = (SiteConfigError, ContentLoadError, InvalidRecordError, RenderError)


app = typer.Typer(
    help="Build, validate and preview the portfolio site",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load(config_path: Optional[Path], content_path: Optional[Path], overrides: dict):
    """Load config and content, turning content errors into a red message and exit 1."""
    try:
        config = load_site_config(config_path, overrides=overrides)
        content = load_content(
            content_path,
            markdown_extensions=config.markdown_extensions,
            include_pages=config.has(Integration.MARKDOWN),
        )
    except CONTENT_ERRORS as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return config, content


def _overrides(adapter: Optional[Adapter], site_url: Optional[str]) -> dict:
    overrides = {}
    if adapter is not None:
        overrides["adapter"] = adapter.value
    if site_url:
        overrides["site_url"] = site_url
    return overrides


ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to site.yaml (default: FOLIO_SITE_CONFIG or packaged)"),
]
ContentOption = Annotated[
    Optional[Path],
    typer.Option("--content", help="Content directory (default: FOLIO_CONTENT_PATH or packaged)"),
]


@app.command("build")
def build_command(
    output_dir: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output directory"),
    ] = OUTPUT_PATH,
    adapter: Annotated[
        Optional[Adapter],
        typer.Option("--adapter", "-a", help="Override the deployment adapter"),
    ] = None,
    site_url: Annotated[
        Optional[str],
        typer.Option("--site-url", help="Override the public site URL"),
    ] = None,
    config_path: ConfigOption = None,
    content_path: ContentOption = None,
    no_clean: Annotated[
        bool,
        typer.Option("--no-clean", help="Keep existing files in the output directory"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print debug output to the console"),
    ] = False,
):
    """
    Build the site.

    Examples:\n

        $ build_site.py build                          # Static build to dist/

        $ build_site.py build -o public --no-clean     # Build into public/ without cleaning
    """
    log_file = setup_logger(
        context_name="build",
        log_dir=LOGS_PATH / f"build_{now()}",
        extra_provenance={"Output": output_dir},
        console_level="DEBUG" if verbose else "INFO",
    )

    config, content = _load(config_path, content_path, _overrides(adapter, site_url))

    typer.secho(f"\nBuilding: {config.title}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Adapter: {config.adapter.value}")
    typer.echo("")

    try:
        result = build_site(config, content, output_dir, clean=not no_clean)
    except (RenderError, ValueError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    if result.success:
        typer.secho("✓ Build succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Pages: {len(result.pages)}")
        typer.echo(f"  Assets: {len(result.assets)}")
        typer.echo(f"  Sitemap files: {len(result.sitemap_files)}")
        typer.echo(f"  Output: {result.output_dir}")
    else:
        typer.secho(f"✗ Build failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True)
        for error in result.errors[:10]:
            typer.secho(f"  - {error}", fg=typer.colors.RED)
        if len(result.errors) > 10:
            typer.echo(f"  ... and {len(result.errors) - 10} more")

    typer.echo(f"  Log: {log_file}")
    typer.echo("")

    if not result.success:
        raise typer.Exit(code=1)


@app.command("check")
def check_command(config_path: ConfigOption = None, content_path: ContentOption = None):
    """Validate site configuration and content."""
    config, content = _load(config_path, content_path, {})

    try:
        routes = collect_routes(config, content)
    except RenderError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Content is valid", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Experience records: {len(content.experience)}")
    typer.echo(f"  Project records: {len(content.projects)}")
    typer.echo(f"  Pages: {len(content.pages)}")
    typer.echo(f"  Routes: {len(routes)}")
    integrations = ", ".join(sorted(i.value for i in config.integrations)) or "(none)"
    typer.echo(f"  Integrations: {integrations}")


@app.command("routes")
def routes_command(config_path: ConfigOption = None, content_path: ContentOption = None):
    """List the routes that would be built."""
    config, content = _load(config_path, content_path, {})
    for route in collect_routes(config, content):
        flags = "" if route.in_sitemap else "  (not in sitemap)"
        typer.echo(f"{route.path:<24} {route.template:<18} {route.title}{flags}")


@app.command("preview")
def preview_command(
    port: Annotated[int, typer.Option("--port", "-p", help="Port to listen on", min=1, max=65535)] = 4321,
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    output_dir: Annotated[Path, typer.Option("--output", "-o", help="Built site directory")] = OUTPUT_PATH,
    config_path: ConfigOption = None,
    content_path: ContentOption = None,
):
    """
    Preview the site locally.

    Serves output_dir for the static adapter; runs the per-request app for the
    serverless adapter.
    """
    config, content = _load(config_path, content_path, {})

    if config.adapter == Adapter.SERVERLESS:
        server = make_server(host, port, create_app(config, content))
    else:
        if not (output_dir / "index.html").exists():
            typer.secho(
                f"Error: no build found in {output_dir}. Run `build_site.py build` first.\n",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1)
        handler = partial(SimpleHTTPRequestHandler, directory=str(output_dir))
        server = ThreadingHTTPServer((host, port), handler)

    typer.secho(f"Serving {config.adapter.value} site at http://{host}:{port}/", fg=typer.colors.GREEN)
    typer.echo("Press Ctrl+C to stop")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        typer.echo("\nStopped")
    finally:
        server.server_close()


if __name__ == "__main__":
    app()
