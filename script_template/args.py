from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

from rich.console import Console

from .cli_shared import ScriptTemplateError, UsageError
from .log import Logger
from .usage import show_usage


class HelpRequested(ScriptTemplateError):
    pass


@dataclass(frozen=True)
class ParsedOptions:
    verbose: bool = False
    input_file: str | None = None
    output_dir: str = "."


@dataclass(frozen=True)
class ParseResult:
    options: ParsedOptions = field(default_factory=ParsedOptions)
    positional: tuple[str, ...] = ()


_VALUE_FLAGS = {
    "-f": "--file",
    "--file": "--file",
    "-o": "--output",
    "--output": "--output",
}


def _flag_value(argv: Sequence[str], i: int, long_name: str) -> str:
    nxt = argv[i + 1] if i + 1 < len(argv) else ""
    if not nxt or nxt.startswith("-"):
        raise UsageError(f"Option {long_name} requires an argument.")
    return nxt


def parse_arguments(argv: Sequence[str], log: Logger | None = None) -> ParseResult:
    """Scan leading flags, then collect everything else as positional.

    Scanning stops at ``--`` (which is dropped) or at the first token that is
    not a flag; no flag is interpreted after that point. ``-v`` switches the
    given logger to verbose so that later debug traces become visible.
    """
    argv = list(argv)
    opts = ParsedOptions()
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok in ("-h", "--help"):
            raise HelpRequested()
        if tok in ("-v", "--verbose"):
            opts = replace(opts, verbose=True)
            if log is not None:
                log.verbose = True
                log.debug("Verbose mode enabled.")
            i += 1
            continue
        if tok in _VALUE_FLAGS:
            long_name = _VALUE_FLAGS[tok]
            val = _flag_value(argv, i, long_name)
            if long_name == "--file":
                opts = replace(opts, input_file=val)
                if log is not None:
                    log.debug(f"Input file set to: {val}")
            else:
                opts = replace(opts, output_dir=val)
                if log is not None:
                    log.debug(f"Output directory set to: {val}")
            i += 2
            continue
        if tok == "--":
            i += 1
            break
        if tok.startswith("-"):
            raise UsageError(f"Unknown option: {tok}")
        break

    positional = tuple(argv[i:])
    if log is not None:
        log.debug(f"Positional arguments: {' '.join(positional)}")
    return ParseResult(options=opts, positional=positional)


def process_arguments(
    argv: Sequence[str],
    log: Logger,
    *,
    prog_name: str,
    console: Console | None = None,
) -> ParseResult:
    """Parse ``argv``; on help or a usage error, show the help and exit 0."""
    try:
        return parse_arguments(argv, log)
    except HelpRequested:
        show_usage(prog_name, console=console)
    except UsageError as e:
        log.error(str(e))
        show_usage(prog_name, console=console)
