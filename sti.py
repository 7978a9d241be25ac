#!/usr/bin/env python3
"""STI management CLI."""

import asyncio
import os
import subprocess
import sys

import click

# The web frontend talks to the API on this port by default.
DEFAULT_PORT = 8080


def _header(text: str) -> None:
    click.echo(f"\n  {click.style(text, fg='cyan', bold=True)}\n")


def _mark(text: str, *, ok: bool = True) -> None:
    symbol = click.style("✓", fg="green") if ok else click.style("✗", fg="red")
    click.echo(f"  {symbol} {text}")


def _run(*args: str, replace: bool = False) -> None:
    click.echo(f"  {click.style('> ' + ' '.join(args), dim=True)}\n")
    if replace:
        os.execvp(args[0], args)
    returncode = subprocess.run(args).returncode
    if returncode != 0:
        _mark(f"exited with code {returncode}", ok=False)
        sys.exit(returncode)


def _uv(*args: str, replace: bool = False) -> None:
    _run("uv", "run", *args, replace=replace)


@click.group()
def cli() -> None:
    """STI management CLI."""


@cli.command()
@click.option("--port", default=DEFAULT_PORT, show_default=True)
@click.argument("uvicorn_args", nargs=-1)
def app(port: int, uvicorn_args: tuple[str, ...]) -> None:
    """Start the API with uvicorn --reload."""
    _header(f"Starting STI on :{port}")
    _uv(
        "uvicorn",
        "src.app:app",
        "--reload",
        "--port",
        str(port),
        *uvicorn_args,
        replace=True,
    )


@cli.group()
def db() -> None:
    """Database management commands."""


@db.command()
def up() -> None:
    """Start PostgreSQL (docker compose up)."""
    _header("Starting PostgreSQL")
    _run("docker", "compose", "up", "-d")
    _mark("PostgreSQL is running")


@db.command()
def down() -> None:
    """Stop PostgreSQL (docker compose down)."""
    _header("Stopping PostgreSQL")
    _run("docker", "compose", "down")
    _mark("PostgreSQL stopped")


@db.command()
@click.argument("target", default="head")
def migrate(target: str) -> None:
    """Run alembic upgrade (to head by default)."""
    _header(f"Migrating to {target}")
    _uv("alembic", "upgrade", target)
    _mark("Migrations applied")


@db.command()
@click.argument("message", default="auto")
def revision(message: str) -> None:
    """Autogenerate an alembic revision from the models."""
    _header(f"Generating migration: {message}")
    _uv("alembic", "revision", "--autogenerate", "-m", message)
    _mark("Migration generated")


@cli.group()
def transformer() -> None:
    """Register transformers that inspections can be attached to."""


@transformer.command("add")
@click.argument("transformer_no")
@click.option("--region")
@click.option("--pole-no")
@click.option("--type", "transformer_type")
@click.option("--location")
def transformer_add(
    transformer_no: str,
    region: str | None,
    pole_no: str | None,
    transformer_type: str | None,
    location: str | None,
) -> None:
    """Add a transformer by its business number."""
    from src.transformer.service import TransformerExistsError, add_transformer

    _header(f"Adding transformer {transformer_no}")
    try:
        asyncio.run(
            add_transformer(
                transformer_no,
                region=region,
                pole_no=pole_no,
                transformer_type=transformer_type,
                location=location,
            )
        )
    except TransformerExistsError:
        _mark(f"Transformer {transformer_no} already exists", ok=False)
        sys.exit(1)
    _mark(f"Transformer {transformer_no} added")


@transformer.command("list")
def transformer_list() -> None:
    """List registered transformers."""
    from src.transformer.service import list_transformers

    _header("Transformers")
    for t in asyncio.run(list_transformers()):
        details = ", ".join(
            v for v in (t.region, t.pole_no, t.transformer_type, t.location) if v
        )
        click.echo(f"  {t.transformer_no}  {click.style(details, dim=True)}")


@cli.command()
@click.argument("pytest_args", nargs=-1)
def test(pytest_args: tuple[str, ...]) -> None:
    """Run the test suite (needs Docker for the PostgreSQL container)."""
    _header("Running tests")
    _uv("pytest", "-v", *pytest_args, replace=True)


@cli.command()
def lint() -> None:
    """Type-check with mypy."""
    _header("Running mypy")
    _uv("mypy", "src", "tests", "sti.py")
    _mark("Type check passed")


if __name__ == "__main__":
    cli()
