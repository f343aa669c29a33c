# src/subdir_order/cli.py

import json
import logging
import sys
import tomllib
from pathlib import Path
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from .config_loader import load_description
from .core import ConfigurationPolicy, ResolutionSession
from .errors import OrderError
from .lib.logging import setup_logging
from .lib.paths import format_path
from .print_plan import render_plan
from .subdirs import plan_solution


logger = logging.getLogger(__name__)


# ────────────────────────── main orchestration ──────────────────────────
def run_description(
    description: Path,
    configurations: Tuple[str, ...] = (),
    fmt: str = "text",
    recursive: bool = True,
    show_closures: bool = False,
) -> int:
    """Load, plan and print one description; return an exit code."""
    try:
        desc = load_description(description)
    except (OSError, tomllib.TOMLDecodeError, ValidationError, ValueError) as e:
        logger.error("Failed to load %s: %s", description, e)
        click.echo(f"Invalid description {description}: {e}", err=True)
        return 2

    logger.info("Loaded solution %s from %s", desc.solution.name,
                format_path(description, Path.cwd()))

    # Explicit -c options replace the description's enabled list
    policy = ConfigurationPolicy(configurations) if configurations else desc.policy

    session = ResolutionSession()
    try:
        plan = plan_solution(desc.solution, policy, session, recursive=recursive)
    except OrderError as e:
        logger.error("Planning %s failed: %s", desc.solution.name, e)
        click.echo(f"Planning failed: {e}", err=True)
        return 1

    logger.debug("Session caches: %s", session.stats())
    if not any(sp.configurations for sp in plan.walk()):
        logger.warning("No supported configuration in %s", desc.solution.name)

    if fmt == "json":
        click.echo(json.dumps(plan.to_dict(), indent=2))
    else:
        click.echo("\n".join(render_plan(plan, session, show_closures)))
    return 0


@click.command()
@click.argument("description", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-c", "--configuration", "configurations", multiple=True,
              help="Plan only these configurations (repeatable).")
@click.option("--format", "fmt", type=click.Choice(["text", "json"]), default="text",
              show_default=True)
@click.option("--recursive/--no-recursive", default=True, show_default=True,
              help="Also plan nested solutions.")
@click.option("--closures", "show_closures", is_flag=True,
              help="List each child's provided and required projects.")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("-q", "--quiet", is_flag=True, help="Do not log to stderr.")
@click.option("-v", "--verbose", is_flag=True, help="Log resolver details.")
def main(
    description: Path,
    configurations: Tuple[str, ...],
    fmt: str,
    recursive: bool,
    show_closures: bool,
    log_file: Optional[Path],
    quiet: bool,
    verbose: bool,
) -> None:
    """Print the subdirectory build order of a solution DESCRIPTION (TOML)."""
    setup_logging(log_file, mode="w", quiet=quiet, verbose=verbose)
    sys.exit(run_description(description, configurations, fmt, recursive, show_closures))


if __name__ == "__main__":  # pragma: no cover
    main()
