from __future__ import annotations

import time
from typing import Callable, Sequence

import click
import typer
from rich import box
from rich.align import Align
from rich.color import Color, ColorParseError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .cli_shared import RunConfig


def ask_favorite_color(config: RunConfig) -> str:
    if not config.interactive:
        return ""
    answer = typer.prompt("What's your favorite color?", default="", show_default=False)
    return str(answer or "").strip()


def choose_option(options: Sequence[str], config: RunConfig, *, header: str = "Select an option:") -> str:
    if not config.interactive or not options:
        return ""
    answer = typer.prompt(header, type=click.Choice(list(options)), show_choices=True)
    return str(answer or "").strip()


def confirm(question: str, config: RunConfig) -> bool:
    if not config.interactive:
        return False
    return bool(typer.confirm(question, default=False))


def run_with_spinner(
    title: str,
    seconds: float,
    console: Console,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    with console.status(title, spinner="dots"):
        sleep(seconds)


def styled_color(name: str) -> Text:
    try:
        Color.parse(name)
    except ColorParseError:
        return Text(name)
    return Text(name, style=f"bold {name}")


def lines_table(lines: Sequence[str]) -> Table:
    table = Table(show_header=False, box=box.ROUNDED)
    table.add_column("line")
    for line in lines:
        table.add_row(Text(line))
    return table


def farewell_panel() -> Panel:
    return Panel(
        Align.center(Text("All Done!\nHave a great day!", justify="center")),
        box=box.DOUBLE,
        width=50,
        padding=(2, 4),
    )
