from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer

from cli.render import ConsoleSink, echo_heading
from logging_config import configure_logging
from models.errors import ThermalSimulationError
from services.device import Device, build_default_device
from settings import Settings, get_settings


@dataclass
class CLIState:
    settings: Settings
    sink: ConsoleSink


app = typer.Typer(
    help="Simulated thermal-management loop with console alerts.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


def _build_device(state: CLIState, interval: Optional[float] = None) -> Device:
    try:
        sensor_interval = interval if interval is not None else state.settings.sensor_interval
        return build_default_device(state.sink, interval=sensor_interval)
    except ThermalSimulationError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _wait_for_key(message: str) -> None:
    typer.echo(message)
    _read_key()


def _read_key() -> str:
    return typer.getchar()


@app.callback()
def root(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (defaults to LOG_LEVEL env or INFO).",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging(log_level.strip().upper() if log_level else None)
    ctx.obj = CLIState(settings=get_settings(), sink=ConsoleSink())


@app.command("run")
def run_command(
    ctx: typer.Context,
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        min=0.0,
        help="Seconds between readings (defaults to THERMAL_SENSOR_INTERVAL env or 1.0).",
    ),
    pause: bool = typer.Option(
        True,
        "--pause/--no-pause",
        help="Wait for a key press before starting and before exiting.",
    ),
) -> None:
    """Play back the reference temperature sequence and report alerts."""
    state = _get_state(ctx)
    if pause:
        _wait_for_key("Press any key to start system")
    device = _build_device(state, interval=interval)
    echo_heading("Device starting.")
    device.run_device()
    typer.echo()
    typer.secho("Simulation complete.", fg=typer.colors.GREEN)
    if pause:
        _wait_for_key("Press any key to exit")


@app.command("emergency")
def emergency_command(ctx: typer.Context) -> None:
    """Trigger the device's emergency shutdown directly."""
    state = _get_state(ctx)
    device = _build_device(state)
    device.handle_emergency()


def main() -> None:
    app()
