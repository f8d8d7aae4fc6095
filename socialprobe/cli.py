"""Command-line interface for socialprobe."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from socialprobe import ProfileService, ProbeConfig, save_json, __version__
from socialprobe.config import LogFormat
from socialprobe.core.exporter import merge_results, save_report, to_dict
from socialprobe.core.orchestrator import parse_platform
from socialprobe.exceptions import UnknownPlatformError
from socialprobe.models.platform import Platform
from socialprobe.models.result import ProfileResult

app = typer.Typer(
    name="socialprobe",
    help="Username presence and profile lookup across platforms",
    add_completion=False,
)
console = Console()

# Profile fields shown in the detail table, when present
_DETAIL_FIELDS = (
    "name", "followers", "following", "posts", "tweets", "likes", "karma",
    "public_repos", "popularity", "monthly_listeners", "bio", "location",
    "company", "joined", "created_at", "url", "external_url", "note",
)


def version_callback(value: bool):
    if value:
        console.print(f"socialprobe version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """socialprobe - username presence and profile lookup."""
    pass


def _platforms(values: list[str] | None) -> list[Platform] | None:
    if not values:
        return None
    try:
        return [parse_platform(v) for v in values]
    except UnknownPlatformError as e:
        console.print(f"[red]{e}[/red]")
        console.print(f"Available platforms: {', '.join(p.value for p in Platform)}")
        raise typer.Exit(1)


@app.command()
def check(
    username: str = typer.Argument(..., help="Username to look up"),
    platform: Optional[list[str]] = typer.Option(
        None, "--platform", "-p", help="Platform to query (repeatable), all if omitted"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output directory for JSON files"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the merged report as JSON"
    ),
):
    """Check which platforms have a profile for USERNAME."""
    targets = _platforms(platform)
    config = ProbeConfig(log_format=LogFormat.JSON if as_json else LogFormat.CONSOLE)

    async def run():
        async with ProfileService(config) as service:
            results = await service.resolve_all(username, targets)

        report = merge_results(username, results)
        if as_json:
            typer.echo(json.dumps(report, indent=2, ensure_ascii=False))
        else:
            _print_summary(username, results)

        if output:
            saved = [
                save_json(result, output / f"{target.value}_{username}.json")
                for target, result in results.items()
            ]
            saved.append(save_report(report, output / f"report_{username}.json"))
            if not as_json:
                for filepath in saved:
                    console.print(f"[dim]Saved to {filepath}[/dim]")

    asyncio.run(run())


@app.command()
def info(
    platform: str = typer.Argument(..., help="Platform identifier"),
    username: str = typer.Argument(..., help="Username to look up"),
):
    """Show profile details for one username on one platform."""
    target = _platforms([platform])[0]

    async def run():
        async with ProfileService(ProbeConfig()) as service:
            result = await service.resolve(target, username)

        if not result.exists:
            console.print(f"[red]No {target.display_name} profile for {username}[/red]")
            raise typer.Exit(1)
        _print_profile_table(target, result)

    asyncio.run(run())


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port"),
):
    """Run the HTTP API."""
    import uvicorn

    config = ProbeConfig()
    uvicorn.run(
        "socialprobe.api:app",
        host=host or config.api_host,
        port=port or config.api_port,
    )


def _provenance_tag(result: ProfileResult) -> str:
    if result.profile is None or result.profile.provenance is None:
        return ""
    return f"[dim]({result.profile.provenance.value})[/dim]"


def _print_summary(username: str, results: dict[Platform, ProfileResult]):
    """Print one row per platform."""
    table = Table(title=username)
    table.add_column("Platform")
    table.add_column("Exists")
    table.add_column("Source")

    for target, result in results.items():
        exists = "[green]yes[/green]" if result.exists else "[red]no[/red]"
        table.add_row(target.display_name, exists, _provenance_tag(result))

    console.print(table)
    found = sum(1 for r in results.values() if r.exists)
    console.print(f"\n[bold]Found on {found}/{len(results)} platforms[/bold]")


def _print_profile_table(target: Platform, result: ProfileResult):
    """Print detailed profile as table."""
    data = to_dict(result)["profile"]

    table = Table(title=f"{target.display_name}: {data['username']} {_provenance_tag(result)}", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    for field in _DETAIL_FIELDS:
        value = data.get(field)
        if value in (None, ""):
            continue
        table.add_row(field.replace("_", " ").title(), f"{value:,}" if isinstance(value, int) else str(value))

    console.print(table)

    for key in ("recent_repos", "recent_tweets", "top_tracks", "albums", "playlists"):
        items = data.get(key) or []
        if items:
            console.print(f"\n[bold]{key.replace('_', ' ').title()} ({len(items)})[/bold]")
            for item in items[:5]:
                label = item.get("name") or item.get("text", "")
                console.print(f"   {label[:60]}")


if __name__ == "__main__":
    app()
