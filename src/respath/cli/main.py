"""CLI entry point for respath.

Invoked as::

    respath [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m respath.cli.main

Commands
--------
resolve     Resolve a result path and optional value
alias       Expand alias markers in a value
aliases     List the aliases and actions of a config file
version     Show version information
"""
from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from respath.config import ConfigError, ResolverConfig, load_config

console = Console()
err_console = Console(stderr=True)


def _parse_alias_option(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    """Turn repeated ``NAME=TARGET`` options into a mapping."""
    aliases: dict[str, str] = {}
    for item in values:
        name, sep, target = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=TARGET, got {item!r}")
        aliases[name] = target
    return aliases


def _load_or_exit(
    config_path: str | None,
    prefix: str | None = None,
    aliases: dict[str, str] | None = None,
) -> ResolverConfig:
    """Load the config file (if any) and apply command-line overrides."""
    if config_path is None:
        config = ResolverConfig()
    else:
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            err_console.print(f"[red]Config error:[/red] {escape(str(exc))}")
            sys.exit(1)

    if prefix is not None:
        config.prefix = prefix
    if aliases:
        config.aliases.update(aliases)
    return config


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="YAML file declaring prefix, aliases and actions",
)
alias_option = click.option(
    "--alias",
    "-a",
    "aliases",
    multiple=True,
    callback=_parse_alias_option,
    help="Extra alias as NAME=TARGET (repeatable, overrides the config file)",
)
verbose_option = click.option(
    "--verbose", "-v", is_flag=True, default=False, help="Enable debug logging"
)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="respath")
def cli() -> None:
    """Result path resolver: expands alias macros and back markers."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from respath import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]respath[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# resolve command
# ---------------------------------------------------------------------------


@cli.command(name="resolve")
@click.argument("path")
@click.argument("value", required=False, default=None)
@config_option
@alias_option
@click.option("--prefix", "-p", default=None, help="Prefix for relative results")
@click.option(
    "--string",
    "as_string",
    is_flag=True,
    default=False,
    help="Print the combined path string after a final alias pass",
)
@verbose_option
def resolve_command(
    path: str,
    value: str | None,
    config_path: str | None,
    aliases: dict[str, str],
    prefix: str | None,
    as_string: bool,
    verbose: bool,
) -> None:
    """Resolve a result PATH with an optional VALUE.

    PATH is the base path of the action; VALUE may contain <alias> and
    leading # markers.
    """
    _setup_logging(verbose)
    resolver = _load_or_exit(config_path, prefix, aliases).build_resolver()

    if as_string:
        click.echo(resolver.resolve_result_path_string(path, value))
        return

    result = resolver.resolve_result_path(path, value)
    table = Table(title="Result path", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Resolved")
    table.add_row("path", escape(result.path))
    table.add_row("value", "[dim]none[/dim]" if result.value is None else escape(result.value))
    table.add_row("full", escape(result.path_value))
    console.print(table)


# ---------------------------------------------------------------------------
# alias command
# ---------------------------------------------------------------------------


@cli.command(name="alias")
@click.argument("value")
@config_option
@alias_option
@verbose_option
def alias_command(
    value: str, config_path: str | None, aliases: dict[str, str], verbose: bool
) -> None:
    """Expand the alias markers in VALUE and print the result."""
    _setup_logging(verbose)
    resolver = _load_or_exit(config_path, aliases=aliases).build_resolver()
    click.echo(resolver.resolve_alias(value))


# ---------------------------------------------------------------------------
# aliases command
# ---------------------------------------------------------------------------


@cli.command(name="aliases")
@config_option
@alias_option
def aliases_command(config_path: str | None, aliases: dict[str, str]) -> None:
    """List the configured aliases and action paths."""
    config = _load_or_exit(config_path, aliases=aliases)

    if not config.aliases and not config.actions:
        console.print("[yellow]No aliases configured.[/yellow]")
        return

    table = Table(title="Aliases", show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Kind")
    table.add_column("Target")
    for name in sorted(config.aliases):
        table.add_row(escape(name), "alias", escape(config.aliases[name]))
    for name in sorted(config.actions):
        table.add_row(escape(name), "[dim]action[/dim]", escape(config.actions[name]))
    console.print(table)

    if config.prefix is not None:
        console.print(f"\n[bold]Prefix:[/bold] {escape(config.prefix)}")


if __name__ == "__main__":
    cli()
