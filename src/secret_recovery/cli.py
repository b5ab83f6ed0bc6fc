# SPDX-FileCopyrightText: 2025 Secret Recovery contributors
# SPDX-License-Identifier: MIT

"""Command line interface: ``secret-recovery solve`` and ``secret-recovery decode``."""

from __future__ import annotations

import logging

import click

from .base_decoder import decode
from .errors import SecretRecoveryError
from .loader import load_path
from .pipeline import solve
from .policy import policy


class RecoveryFailed(click.ClickException):
    """Report a :class:`SecretRecoveryError` by kind and abort."""

    def __init__(self, exc: SecretRecoveryError, source: str | None = None) -> None:
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{type(exc).__name__}: {exc}")
        self.error = exc


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr")
def main(verbose: bool) -> None:
    """Recover polynomial secrets from base-encoded shares."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else policy.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("solve")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"]),
    default=None,
    help="Document format (default: from the file suffix)",
)
def solve_command(paths: tuple[str, ...], fmt: str | None) -> None:
    """Print the secret recovered from each share document."""
    for path in paths:
        try:
            secret = solve(load_path(path, fmt=fmt))
        except SecretRecoveryError as exc:
            raise RecoveryFailed(exc, path) from exc
        click.echo(str(secret) if len(paths) == 1 else f"{path}: {secret}")


@main.command("decode")
@click.argument("digits")
@click.argument("base", type=int)
def decode_command(digits: str, base: int) -> None:
    """Print DIGITS written in BASE as a decimal integer."""
    try:
        click.echo(str(decode(digits, base)))
    except SecretRecoveryError as exc:
        raise RecoveryFailed(exc) from exc


if __name__ == "__main__":
    main()
