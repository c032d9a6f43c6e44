"""Command-line interface."""

from pipelinecraft.cli.commands import PROFILES, build_pytest_args, cli, main

__all__ = ["cli", "main", "PROFILES", "build_pytest_args"]
