"""VoltMind management CLI."""

import asyncio
import os
import subprocess
import sys

import click

from voltmind.dashboard.state import make_timestamp_label
from voltmind.estimation.engine import EstimationEngine
from voltmind.oracle import OracleConfig, create_oracle
from voltmind.stations.reconciler import StationReconciler


def _run(args: list[str], *, replace: bool = False) -> None:
    click.echo(
        f"  {click.style('>', dim=True)} {click.style(' '.join(args), dim=True)}\n"
    )
    if replace:
        os.execvp(args[0], args)
    result = subprocess.run(args)
    if result.returncode != 0:
        click.echo(
            f"  {click.style('✗', fg='red')} exited with code {result.returncode}"
        )
        sys.exit(result.returncode)


def _ok(text: str) -> None:
    click.echo(f"  {click.style('✓', fg='green')} {text}")


def _header(text: str) -> None:
    click.echo(f"\n  {click.style(text, fg='cyan', bold=True)}\n")


@click.group()
def cli() -> None:
    """VoltMind management CLI."""


@cli.command()
@click.argument("uvicorn_args", nargs=-1)
def app(uvicorn_args: tuple[str, ...]) -> None:
    """Start uvicorn with --reload."""
    _header("Starting VoltMind")
    _run(
        ["uv", "run", "uvicorn", "voltmind.app:app", "--reload", *uvicorn_args],
        replace=True,
    )


@cli.group()
def db() -> None:
    """Database management commands."""


@db.command()
def init() -> None:
    """Create the history tables."""
    from voltmind.base.db import DATABASE_URI, create_tables

    _header(f"Creating tables in {DATABASE_URI}")
    asyncio.run(create_tables())
    _ok("Tables ready")


@cli.command()
@click.argument("battery", type=click.IntRange(0, 100, clamp=True))
@click.option("--time", "timestamp", default=None, help="Time label, defaults to now.")
def estimate(battery: int, timestamp: str | None) -> None:
    """Estimate range and time left for a battery level."""
    engine = EstimationEngine(create_oracle(OracleConfig.from_env()))
    result = asyncio.run(engine.estimate(battery, timestamp or make_timestamp_label()))

    _header(f"Battery {battery}%")
    click.echo(f"  Range      {result.range_km:.1f} km")
    click.echo(f"  Time left  {result.time_left_hours:.1f} h")
    click.echo(f"  Note       {result.efficiency_note}")
    click.echo(f"  Source     {result.source.value}")


@cli.command()
@click.argument("latitude", type=click.FloatRange(-90, 90))
@click.argument("longitude", type=click.FloatRange(-180, 180))
def stations(latitude: float, longitude: float) -> None:
    """List the nearest charging stations."""
    reconciler = StationReconciler(create_oracle(OracleConfig.from_env()))
    result = asyncio.run(reconciler.find_stations(latitude, longitude))

    _header(f"Stations near ({latitude}, {longitude})")
    if not result.stations:
        click.echo(f"  {result.text}")
        return
    for station in result.stations:
        rating = f"{station.rating:.1f}" if station.rating is not None else "N/A"
        click.echo(f"  {click.style(station.name, bold=True)}  ★ {rating}")
        click.echo(f"    {station.address}")
        if station.uri:
            click.echo(f"    {click.style(station.uri, dim=True)}")


@cli.command()
@click.argument("pytest_args", nargs=-1)
def test(pytest_args: tuple[str, ...]) -> None:
    """Run pytest."""
    _header("Running tests")
    _run(["uv", "run", "pytest", "tests/", "-v", *pytest_args], replace=True)


@cli.command()
def lint() -> None:
    """Run mypy."""
    _header("Running mypy")
    _run(["uv", "run", "mypy", "."])
    _ok("Type check passed")


if __name__ == "__main__":
    cli()
