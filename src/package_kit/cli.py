"""Command-line interface for package_kit.

Provides the ``package-kit`` entry point for listing the license files of
the dependencies pinned in a Package.resolved manifest.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from package_kit.catalog import PackageCatalog
from package_kit.models import Package
from package_kit.resolvers import RawGitHubResolver, RemoteFileProbe
from package_kit.scanners import get_scanner

app = typer.Typer(
    name="package-kit",
    help="Find license files for Swift package dependencies.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)


def _setup_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("package_kit").setLevel(level)


@app.callback()
def main() -> None:
    """Find license files for Swift package dependencies."""


async def _resolve_packages(
    manifest: Path,
    timeout: float,
    concurrency: int,
    github_token: Optional[str],
) -> list[Package]:
    """Scan the manifest and resolve license URLs for all its packages.

    Args:
        manifest: Path to Package.resolved.
        timeout: Per-request timeout in seconds.
        concurrency: Maximum number of dependencies probed concurrently.
        github_token: Optional GitHub token.

    Returns:
        List of Package objects in manifest order.

    Raises:
        FileNotFoundError: If the manifest does not exist.
        ValueError: If the manifest is unsupported or invalid.
    """
    dependencies = get_scanner(manifest).scan()
    if not dependencies:
        return []

    resolver = RawGitHubResolver(timeout=timeout, github_token=github_token)
    async with PackageCatalog(
        dependencies, resolver=resolver, concurrency=concurrency
    ) as catalog:
        return await catalog.get_packages()


def _render_table(packages: list[Package]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Package")
    table.add_column("Location", overflow="fold")
    table.add_column("License", overflow="fold")

    for package in packages:
        table.add_row(
            package.name,
            package.location,
            package.license_url or "[yellow]not found[/yellow]",
        )
    return table


@app.command()
def scan(
    manifest: Annotated[
        Path,
        typer.Argument(
            help="Path to Package.resolved",
            exists=True,
            readable=True,
            dir_okay=False,
        ),
    ],
    timeout: Annotated[
        float,
        typer.Option(
            "--timeout",
            min=0.1,
            help="Per-request timeout in seconds",
        ),
    ] = RemoteFileProbe.DEFAULT_TIMEOUT,
    concurrency: Annotated[
        int,
        typer.Option(
            "--concurrency",
            "-c",
            min=1,
            help="Maximum number of packages probed at once",
        ),
    ] = PackageCatalog.DEFAULT_CONCURRENCY,
    github_token: Annotated[
        Optional[str],
        typer.Option(
            "--github-token",
            envvar="GITHUB_TOKEN",
            help="GitHub token, needed for private repositories",
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Exit with code 1 if any package has no license file",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output",
        ),
    ] = False,
) -> None:
    """List the license file of every pinned dependency.

    Exit codes:
        0 - Success
        1 - Error, or missing licenses with --strict
    """
    _setup_logging(verbose)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    ) as progress:
        progress.add_task("Probing license files...", total=None)

        try:
            packages = asyncio.run(
                _resolve_packages(
                    manifest=manifest,
                    timeout=timeout,
                    concurrency=concurrency,
                    github_token=github_token,
                )
            )
        except (FileNotFoundError, ValueError) as e:
            err_console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(code=1)

    if not packages:
        console.print("[yellow]No packages found in manifest[/yellow]")
        raise typer.Exit(code=0)

    console.print(_render_table(packages))

    missing = [package.name for package in packages if not package.has_license]
    console.print(
        f"Found licenses for [bold]{len(packages) - len(missing)}[/bold]"
        f"/{len(packages)} packages"
    )

    if strict and missing:
        console.print(f"\n[red]Missing licenses ({len(missing)}):[/red]")
        for name in missing:
            console.print(f"  - {name}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
