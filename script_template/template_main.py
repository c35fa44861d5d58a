from __future__ import annotations

import sys

import click
import typer
from rich.console import Console
from rich.markup import escape

from . import workflow
from .args import process_arguments
from .cli_shared import (
    MissingDependencyError,
    OpError,
    UsageError,
    _bootstrap_env,
    _run_config_from_env,
)
from .deps import REQUIRED_TOOLS, check_dependencies
from .log import Logger
from .usage import program_name

_ERROR_CONSOLE = Console(stderr=True, highlight=False, soft_wrap=True)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}")


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    prog_name = program_name()
    console = Console(highlight=False, soft_wrap=True)
    log = Logger(console=console)
    try:
        _bootstrap_env()

        log.info("Checking dependencies...")
        check_dependencies(REQUIRED_TOOLS, log)
        log.success("Dependencies check passed.")

        result = process_arguments(argv, log, prog_name=prog_name, console=console)
        config = _run_config_from_env()
        return workflow.run(result, config, log, console, prog_name=prog_name)
    except typer.Exit as e:
        return int(e.exit_code)
    except MissingDependencyError as e:
        return e.exit_code
    except (KeyboardInterrupt, click.Abort):
        _rich_error("aborted")
        return 130
    except UsageError as e:
        _rich_error(str(e))
        return 2
    except OpError as e:
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
