"""Plug Autoloader CLI - resolve namespaced names to files from the shell."""

from __future__ import annotations

import json
import logging
import sys

import click

from plug_autoloader.config import DEFAULT_EXTENSION, NAMESPACE_SEPARATOR, LoaderConfig
from plug_autoloader.manifest import load_manifest
from plug_autoloader.output import build_report, write_output
from plug_autoloader.resolver import Resolver


@click.group()
def cli() -> None:
    """Plug Autoloader - PSR-4 style namespace-to-file resolution."""
    pass


def _parse_mapping(ctx, param, values: tuple[str, ...]) -> list[tuple[str, str]]:
    mappings = []
    for value in values:
        prefix, sep, directory = value.partition("=")
        if not sep or not prefix.strip(NAMESPACE_SEPARATOR) or not directory:
            raise click.BadParameter(f"expected PREFIX=DIR, got {value!r}")
        mappings.append((prefix, directory))
    return mappings


def _setup_logging(verbose: bool, quiet: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _build_resolver(
    manifest_path: str | None,
    mappings: list[tuple[str, str]],
    prepend: bool,
    extension: str | None,
    config: LoaderConfig,
) -> Resolver:
    """Build a resolver from an optional manifest plus command-line mappings."""
    if manifest_path:
        try:
            resolver = load_manifest(manifest_path).build_resolver(config)
        except ValueError as e:
            raise click.ClickException(str(e))
    else:
        resolver = Resolver(config=config)

    if extension:
        resolver.config.extension = extension

    for prefix, directory in mappings:
        resolver.add_namespace(prefix, directory, prepend=prepend)
    return resolver


_mapping_option = click.option(
    "-m", "--map", "mappings", multiple=True, callback=_parse_mapping,
    help="Namespace mapping as PREFIX=DIR (repeatable)",
)
_manifest_option = click.option(
    "--manifest", "manifest_path", default=None, type=click.Path(exists=True),
    help="autoload.json file (or a directory containing one)",
)


@cli.command("resolve")
@click.argument("name")
@_manifest_option
@_mapping_option
@click.option("--prepend", is_flag=True, help="Prepend command-line mappings instead of appending")
@click.option("--ext", "extension", default=None, help=f"Source file extension (default {DEFAULT_EXTENSION})")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("-o", "--output", "output_path", default=None, help="Write the JSON report to a file")
@click.option("--verbose", is_flag=True, help="Log every probe")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors")
def resolve_cmd(
    name: str,
    manifest_path: str | None,
    mappings: list[tuple[str, str]],
    prepend: bool,
    extension: str | None,
    as_json: bool,
    output_path: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Resolve NAME to a file and show every candidate probed."""
    if not name:
        raise click.BadParameter("name must not be empty", param_hint="NAME")

    _setup_logging(verbose, quiet)
    config = LoaderConfig()
    resolver = _build_resolver(manifest_path, mappings, prepend, extension, config)

    report = build_report(resolver, name)

    if output_path:
        write_output(report, output_path)

    if as_json:
        click.echo(json.dumps(report, indent=2))
    elif not quiet:
        _print_report(report)

    if not report["found"]:
        sys.exit(1)


def _print_report(report: dict) -> None:
    from rich.console import Console
    from rich.table import Table

    console = Console()

    table = Table(title=f"Candidates for {report['name']}", show_edge=False)
    table.add_column("Prefix", style="bold", no_wrap=True)
    table.add_column("Path")
    table.add_column("Exists", justify="right")
    for probe in report["candidates"]:
        exists = "[green]yes[/green]" if probe["exists"] else "[dim]no[/dim]"
        table.add_row(probe["prefix"], probe["path"], exists)

    if report["candidates"]:
        console.print(table)

    if report["found"]:
        console.print(f"[green]Found:[/green] {report['path']}")
    else:
        console.print(f"[red]Not found:[/red] {report['name']}")


@cli.command("namespaces")
@_manifest_option
@_mapping_option
def namespaces_cmd(manifest_path: str | None, mappings: list[tuple[str, str]]) -> None:
    """List registered namespace prefixes and their base directories."""
    from rich.console import Console
    from rich.table import Table

    resolver = _build_resolver(manifest_path, mappings, False, None, LoaderConfig())

    table = Table(title="Registered namespaces", show_edge=False)
    table.add_column("Prefix", style="bold", no_wrap=True)
    table.add_column("Directories")
    for prefix, directories in resolver.registry.as_dict().items():
        table.add_row(prefix, "\n".join(directories))

    Console().print(table)


if __name__ == "__main__":
    cli()
