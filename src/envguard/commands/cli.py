"""CLI wrapper for resolving a spec file against the environment."""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import IO, Any

import click

from envguard.loader import ConfigError, ConfigResolver


def _parse_assignments(assignments: tuple[str, ...]) -> dict[str, str]:
    """Turn ``NAME=VALUE`` pairs into a dict; later pairs win."""
    values: dict[str, str] = {}
    for assignment in assignments:
        name, sep, value = assignment.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(
                f"expected NAME=VALUE, got {assignment!r}", param_hint="--set"
            )
        values[name.strip()] = value
    return values


def check_command(
    spec: Any,
    *,
    overrides: dict[str, str] | None = None,
    use_environ: bool = True,
) -> dict[str, Any]:
    """Resolve *spec* against the environment overlaid with *overrides*.

    Args:
        spec: Parsed spec document (``{"global": [...]}``)
        overrides: Values that take precedence over the environment
        use_environ: Whether to read ``os.environ`` at all
    """
    values: dict[str, Any] = dict(os.environ) if use_environ else {}
    values.update(overrides or {})
    return ConfigResolver(values).load(spec)


@click.group("envguard")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution details to stderr.")
def envguard_group(verbose: bool) -> None:
    """Declarative environment configuration checks."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@envguard_group.command("check")
@click.argument("spec_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="NAME=VALUE",
    help="Provide or override a value (repeatable).",
)
@click.option(
    "--environ/--no-environ",
    default=True,
    help="Read the process environment (default: True)",
)
def check_cli(spec_file: IO[str], assignments: tuple[str, ...], environ: bool) -> None:
    """Resolve SPEC_FILE and print the typed configuration as JSON.

    Examples:\n
        envguard check env.json\n
        envguard check env.json --no-environ --set PORT=8080 --set MODE=prod\n
    """
    try:
        spec = json.load(spec_file)
    except ValueError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="SPEC_FILE") from e

    overrides = _parse_assignments(assignments)

    try:
        resolved = check_command(spec, overrides=overrides, use_environ=environ)
    except ConfigError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    click.echo(json.dumps(resolved, indent=2, sort_keys=True))


if __name__ == "__main__":  # pragma: no cover
    envguard_group()
