"""steptrace CLI — thin Typer wrapper over library calls."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from steptrace import __version__
from steptrace.core.timeline import Timeline
from steptrace.errors import SteptraceError

app = typer.Typer(
    name="steptrace",
    help="Step backward and forward through recorded Minimal Machine executions.",
    no_args_is_help=True,
)
console = Console()

_REGISTER_NAMES = {-1: "IAR", -2: "ACCU"}


def _open(trace_file: Path, config_file: Optional[Path], validate: bool = False) -> Timeline:
    from steptrace.config import TimelineConfig
    from steptrace.loader import open_timeline

    config = TimelineConfig.load(config_file)
    if validate:
        config = config.model_copy(update={"validate_log": True})
    return open_timeline(trace_file, config)


def _describe(timeline: Timeline, address: int) -> str:
    if address in _REGISTER_NAMES:
        return _REGISTER_NAMES[address]
    name = timeline.get_name_for(address)
    return f"{address} ({name})" if name else str(address)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr")) -> None:
    from steptrace.utils.logging import configure_logging

    if verbose:
        configure_logging(logging.DEBUG)


@app.command()
def version() -> None:
    """Show steptrace version."""
    console.print(f"steptrace {__version__}")


@app.command()
def validate(
    trace_file: Path = typer.Argument(..., help="Path to trace file (YAML or JSON)"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Timeline config YAML"),
) -> None:
    """Check that a trace file loads and its delta log replays consistently."""
    try:
        timeline = _open(trace_file, config_file, validate=True)
    except SteptraceError as e:
        console.print(f"[red]Validation failed:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    console.print(f"[green]Valid trace:[/green] {trace_file.name}")
    console.print(f"  Steps: {timeline.count_steps()}")
    console.print(f"  Commands: {len(timeline.get_commands())}")
    console.print(f"  Labels: {len(timeline.get_label_map())}")


@app.command()
def inspect(
    trace_file: Path = typer.Argument(..., help="Path to trace file (YAML or JSON)"),
    position: int = typer.Option(0, "--position", "-p", help="Step to move to (clamped)"),
    addresses: Optional[list[int]] = typer.Option(
        None, "--address", "-a", help="Cell to show; repeatable. Shows all cells if omitted"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print machine-readable JSON"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Timeline config YAML"),
) -> None:
    """Show the machine state at a step."""
    from steptrace.core.state import IAR

    try:
        timeline = _open(trace_file, config_file)
        timeline.set_position(position)
        shown = addresses or timeline.expose_state().addresses()
        cells = {address: timeline.get(address) for address in shown}
    except SteptraceError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    iar = timeline.get(IAR)
    command = timeline.find_current_command()

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "position": timeline.get_position(),
                    "steps": timeline.count_steps(),
                    "iar": iar,
                    "iar_label": timeline.get_name_for(iar),
                    "command": command.model_dump() if command else None,
                    "cells": {str(a): v for a, v in cells.items()},
                },
                indent=2,
            )
        )
        return

    console.print(f"\n[bold]Step {timeline.get_position()} of {timeline.count_steps()}[/bold]")
    console.print(f"  IAR: {_describe(timeline, iar)}", highlight=False)
    if command is not None:
        console.print(f"  Next: {command.render()}", highlight=False)
    else:
        console.print("  Next: [dim]none (halted or outside code)[/dim]")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Address")
    table.add_column("Value", justify="right")
    for address, value in cells.items():
        table.add_row(_describe(timeline, address), str(value))
    console.print(table)


@app.command()
def step(
    trace_file: Path = typer.Argument(..., help="Path to trace file (YAML or JSON)"),
    start: int = typer.Option(0, "--from", help="Step to start from"),
    by: int = typer.Option(1, "--by", help="Steps to move; negative moves backward"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Timeline config YAML"),
) -> None:
    """Print every notification emitted while moving the cursor."""
    from steptrace.core.listener import CallbackListener
    from steptrace.models.notification import CellChanged

    try:
        timeline = _open(trace_file, config_file)
    except SteptraceError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    timeline.set_position(start)
    received = []
    timeline.add_listener(CallbackListener(received.append))
    timeline.add_to_position(by)

    for notification in received:
        if isinstance(notification, CellChanged):
            console.print(
                f"  [cyan]write[/cyan]  {_describe(timeline, notification.address)} = {notification.value}",
                highlight=False,
            )
        else:
            console.print(f"  [yellow]cursor[/yellow] -> {notification.position}", highlight=False)
