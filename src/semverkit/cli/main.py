"""CLI entry point for semverkit.

Invoked as::

    semverkit [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m semverkit.cli.main

Commands
--------
parse       Parse a version string and dump its components
validate    Check one or more version strings
compare     Compare two versions by SemVer precedence
sort        Print versions in precedence order
info        Show version information
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from semverkit.version.version import Version

console = Console()
err_console = Console(stderr=True)

_STRICT_OPTION = click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Require MAJOR.MINOR.PATCH without leading zeros",
)


def _parse_or_exit(text: str, strict: bool) -> "Version":
    """Parse a version string, printing the failure and exiting on error."""
    from semverkit.parser import VersionParseError, parse

    try:
        return parse(text, strict=strict)
    except VersionParseError as exc:
        err_console.print(f"[red]Invalid version[/red] {escape(repr(text))}: {exc.kind.value}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="semverkit")
def cli() -> None:
    """Semantic-version toolkit: parse, validate, compare and sort versions."""


# ---------------------------------------------------------------------------
# info command
# ---------------------------------------------------------------------------


@cli.command(name="info")
def info_command() -> None:
    """Show detailed version information."""
    from semverkit import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]semverkit[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("version")
@_STRICT_OPTION
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def parse_command(version: str, strict: bool, output_format: str, output: str | None) -> None:
    """Parse a version string and dump its components.

    VERSION is the version string to parse.
    """
    from semverkit.version import VersionSerializer

    parsed = _parse_or_exit(version, strict)
    serializer = VersionSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(parsed, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(parsed)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Components written to[/green] {output}")
    else:
        console.print(Syntax(text, lang))


# ---------------------------------------------------------------------------
# validate command
# ---------------------------------------------------------------------------


@cli.command(name="validate")
@click.argument("versions", nargs=-1, required=True)
@_STRICT_OPTION
def validate_command(versions: tuple[str, ...], strict: bool) -> None:
    """Check whether each VERSIONS argument is a valid version string."""
    from semverkit.parser import VersionParseError, get_parser

    parser = get_parser(strict)
    table = Table(title="Validation (strict)" if strict else "Validation (lenient)")
    table.add_column("Version", min_width=12)
    table.add_column("Result", style="bold", min_width=8)
    table.add_column("Detail")

    failures = 0
    for text in versions:
        try:
            parsed = parser.parse(text)
        except VersionParseError as exc:
            failures += 1
            table.add_row(escape(text), "[red]INVALID[/red]", exc.kind.value)
        else:
            table.add_row(escape(text), "[green]OK[/green]", escape(f"canonical {parsed.canonicalized()}"))

    console.print(table)
    console.print(f"\n[bold]Summary:[/bold] {len(versions) - failures} valid, {failures} invalid")

    if failures:
        sys.exit(1)


# ---------------------------------------------------------------------------
# compare command
# ---------------------------------------------------------------------------


_RELATION_SYMBOLS: dict[int, str] = {-1: "<", 0: "=", 1: ">"}


@cli.command(name="compare")
@click.argument("left")
@click.argument("right")
@_STRICT_OPTION
def compare_command(left: str, right: str, strict: bool) -> None:
    """Compare LEFT and RIGHT by SemVer precedence."""
    left_version = _parse_or_exit(left, strict)
    right_version = _parse_or_exit(right, strict)

    result = left_version.compare(right_version)
    console.print(escape(f"{left_version} {_RELATION_SYMBOLS[result]} {right_version}"))
    if result == 0 and not left_version.identical(right_version):
        console.print("[dim]equal precedence, different build metadata[/dim]")


# ---------------------------------------------------------------------------
# sort command
# ---------------------------------------------------------------------------


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", is_flag=True, default=False, help="Highest version first")
@_STRICT_OPTION
def sort_command(versions: tuple[str, ...], reverse: bool, strict: bool) -> None:
    """Print VERSIONS in SemVer precedence order, one per line."""
    parsed = [_parse_or_exit(text, strict) for text in versions]
    for version in sorted(parsed, reverse=reverse):
        click.echo(str(version))


if __name__ == "__main__":
    cli()
