from __future__ import annotations

from typing import Dict

import typer

from models.schemas import AlertMessage, Severity

SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.info: typer.colors.GREEN,
    Severity.warning: typer.colors.YELLOW,
    Severity.emergency: typer.colors.RED,
}


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def render_alert(message: AlertMessage) -> None:
    typer.echo()
    line = message.text
    if message.value is not None:
        line = f"{line} [reading: {message.value}]"
    typer.secho(line, fg=SEVERITY_COLORS.get(message.severity))


class ConsoleSink:
    """Alert sink that writes color-coded lines to the terminal."""

    def emit(self, message: AlertMessage) -> None:
        render_alert(message)
