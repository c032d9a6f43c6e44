"""CLI commands for PipelineCraft."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import click
import pytest
from rich.console import Console
from rich.table import Table

from pipelinecraft.config import Settings, load_settings

DEFAULT_PATHS = ("tests",)


@dataclass(frozen=True)
class Profile:
    """A named selection of tests, mirroring the suite's tagging scheme."""

    name: str
    markers: str
    description: str


PROFILES = {
    "default": Profile("default", "not wip", "Everything except work in progress"),
    "smoke": Profile("smoke", "smoke", "Quick checks of the main flows"),
    "regression": Profile("regression", "regression", "Full regression suite"),
    "ci": Profile("ci", "not wip", "CI pipeline: JUnit report, short tracebacks"),
}


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_pytest_args(
    profile: Profile,
    paths: tuple[str, ...],
    settings: Settings,
    config_path: str | None = None,
    network: bool = False,
) -> list[str]:
    """Translate a profile into pytest command-line arguments."""
    report_dir = Path(settings.report_dir)
    args = [*(paths or DEFAULT_PATHS), "-m", profile.markers]
    args.append(f"--junitxml={report_dir / f'junit-{profile.name}.xml'}")
    if profile.name == "ci":
        args.append("--tb=short")
    if settings.verbose:
        args.append("-v")
    if network:
        args.append("--network")
    if config_path:
        args.append(f"--pipelinecraft-config={config_path}")
    return args


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """PipelineCraft - Screenplay test suite for SauceDemo and DummyJSON."""
    ctx.ensure_object(dict)

    settings = load_settings(config)
    if verbose:
        settings.verbose = True

    ctx.obj["settings"] = settings
    ctx.obj["config_path"] = config

    setup_logging(verbose)


@cli.command()
@click.argument("paths", nargs=-1)
@click.option(
    "--profile",
    "-p",
    type=click.Choice(sorted(PROFILES)),
    default="default",
    help="Which tests to run",
)
@click.option("--network/--no-network", default=False, help="Include tests against live sites")
@click.pass_context
def run(ctx: click.Context, paths: tuple[str, ...], profile: str, network: bool) -> None:
    """Run the suite with pytest using a named profile."""
    settings: Settings = ctx.obj["settings"]
    selected = PROFILES[profile]

    Path(settings.report_dir).mkdir(parents=True, exist_ok=True)
    args = build_pytest_args(selected, paths, settings, ctx.obj["config_path"], network)

    click.echo(f"Running profile '{selected.name}': {selected.description}")
    exit_code = pytest.main(args)
    ctx.exit(int(exit_code))


@cli.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the effective settings."""
    settings: Settings = ctx.obj["settings"]

    table = Table(title="PipelineCraft settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in settings.masked().items():
        table.add_row(key, str(value))

    Console().print(table)


def main() -> None:
    cli(obj={})
