from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text


def program_name(argv0: str | None = None) -> str:
    raw = sys.argv[0] if argv0 is None else argv0
    path = Path(str(raw or ""))
    # `python -m pkg` sets argv[0] to pkg/__main__.py
    if path.name == "__main__.py" and path.parent.name:
        return f"python -m {path.parent.name}"
    return path.name or "script-template"


def render_usage(prog_name: str) -> str:
    lines = [
        f"Usage: {prog_name} [OPTIONS] [ARGUMENTS...]",
        "",
        "Description:",
        "  This is a template script demonstrating various functionalities.",
        "",
        "Options:",
        "  -h, --help         Show this help message and exit.",
        "  -v, --verbose      Enable verbose/debug output.",
        "  -f, --file <path>  Specify an input file.",
        "  -o, --output <dir> Specify an output directory (default: current).",
        "",
        "Arguments:",
        "  arg1 arg2 ...    Positional arguments for the script.",
        "",
        "Examples:",
        f"  {prog_name} -v -f data.txt -o ./results item1 item2",
        f"  {prog_name} --help",
    ]
    return "\n".join(lines)


def show_usage(prog_name: str, *, console: Console | None = None) -> NoReturn:
    out = console or Console(highlight=False)
    out.print(
        Panel(
            Text(render_usage(prog_name)),
            box=box.HEAVY,
            border_style="color(212)",
            padding=(1, 2),
            expand=False,
        )
    )
    raise typer.Exit(code=0)
