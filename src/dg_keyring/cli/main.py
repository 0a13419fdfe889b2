"""Typer-based command line interface for inspecting keyring documents."""
from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn, Optional

import click
import typer

from ..config import AppConfig, load_config
from ..document import keyring_from_path
from ..errors import KeyRingError
from ..keyring import KeyRing
from ..logging import configure_logging

app = typer.Typer(help="DG Keyring command line interface")


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        _fail(str(exc))
    configure_logging(ctx.obj.logging.normalized_level())


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _load_ring(path: Path) -> KeyRing:
    config: AppConfig = click.get_current_context().obj
    try:
        return keyring_from_path(path, default_key_size=config.key_size)
    except KeyRingError as exc:
        _fail(f"{exc.code}: {exc}")
    except ValueError as exc:
        _fail(str(exc))


@app.command()
def check(path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False)) -> None:
    """Validate a keyring document and list its entries without key bytes."""
    ring = _load_ring(path)
    eligible = set(ring.eligible_ids())
    summary = [
        {"id": entry.id, "size": entry.size, "random_pick": entry.id in eligible}
        for entry in ring
    ]
    typer.echo(json.dumps(summary, indent=2))


@app.command()
def pick(path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False)) -> None:
    """Print the id of a randomly picked eligible key."""
    ring = _load_ring(path)
    try:
        entry = ring.get_random_key()
    except KeyRingError as exc:
        _fail(f"{exc.code}: {exc}")
    else:
        typer.echo(entry.id)


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
