from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.text import Text

from .args import ParseResult
from .cli_shared import OpError, RunConfig
from .github import fetch_latest_release, gh_authenticated, release_summary, repo_short_name
from .interactive import (
    ask_favorite_color,
    choose_option,
    confirm,
    farewell_panel,
    lines_table,
    run_with_spinner,
    styled_color,
)
from .log import Logger
from .net import fetch_public_ip

CHOICES = ("Option A", "Option B", "Option C")
HEAD_LINES = 3


def _report_latest_release(config: RunConfig, log: Logger) -> None:
    repo = config.release_repo
    log.info(f"Fetching latest release for {repo} using GitHub CLI...")
    if not gh_authenticated():
        log.warn("GitHub CLI not authenticated. Attempting anonymous access.")
    doc = fetch_latest_release(repo)
    if doc is None:
        log.error(f"Failed to fetch latest release info for {repo}.")
        return
    tag, url = release_summary(doc)
    log.info(f"Latest {repo_short_name(repo)} release tag: {tag} (URL: {url})")


def _interact(config: RunConfig, log: Logger, console: Console) -> None:
    log.info("Demonstrating interactive prompts.")
    color = ask_favorite_color(config)
    if color:
        log.info(Text.assemble("Your favorite color is: ", styled_color(color)))
    else:
        log.warn("No favorite color entered.")

    choice = choose_option(CHOICES, config)
    if choice:
        log.info(f"You chose: {choice}")
    else:
        log.warn("No choice made.")

    if confirm("Do you want to proceed with a dummy long task?", config):
        log.info("Starting dummy long task...")
        run_with_spinner("Processing...", config.task_seconds, console)
        log.success("Dummy long task completed.")
    else:
        log.info("Skipping dummy long task.")


def write_example_output(output_dir: str, *, prog_name: str, now: datetime) -> Path:
    out_dir = Path(output_dir)
    stamp = now.strftime("%Y%m%d_%H%M%S")
    path = out_dir / f"example_output_{stamp}.txt"
    text = (
        f"This is an example output file generated by {prog_name} "
        f"at {now.strftime('%Y-%m-%d %H:%M:%S %Z')}\n"
    )
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OpError(f"failed to write {path}: {e}") from e
    return path


def summarize_input_file(path: Path) -> tuple[list[str], int]:
    """Return the first lines of ``path`` and the count of lines mentioning 'error'."""
    try:
        lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as e:
        raise OpError(f"failed to read {path}: {e}") from e
    error_lines = sum(1 for line in lines if "error" in line.lower())
    return lines[:HEAD_LINES], error_lines


def _process_input_file(input_file: str, log: Logger, console: Console) -> None:
    path = Path(input_file)
    if not path.is_file():
        log.error(f"Input file not found: {input_file}")
        return
    log.info(f"Processing input file: {input_file}")
    log.info(f"First {HEAD_LINES} lines of {input_file} (if it has them):")
    head, error_lines = summarize_input_file(path)
    console.print(lines_table(head))
    log.info(
        f"Number of lines containing 'error' (case-insensitive) in {input_file}: {error_lines}"
    )


def run(
    result: ParseResult,
    config: RunConfig,
    log: Logger,
    console: Console,
    *,
    prog_name: str,
    now: Callable[[], datetime] = datetime.now,
) -> int:
    opts = result.options

    _report_latest_release(config, log)
    _interact(config, log, console)

    log.info("Demonstrating common file and network operations.")
    current = now().astimezone()
    log.info(f"Current date and time: {current.strftime('%Y-%m-%d %H:%M:%S %Z')}")

    if not Path(opts.output_dir).is_dir():
        log.info(f"Creating output directory: {opts.output_dir}")
    out_path = write_example_output(opts.output_dir, prog_name=prog_name, now=current)
    log.success(f"Created example output file: {out_path}")

    log.info("Fetching public IP address...")
    public_ip = fetch_public_ip(config.public_ip_url)
    log.info(f"Your public IP address appears to be: {public_ip}")

    if opts.input_file:
        _process_input_file(opts.input_file, log, console)

    if result.positional:
        log.info("Processing positional arguments:")
        for arg in result.positional:
            log.info(f"  - Argument: {arg}")
    else:
        log.info("No positional arguments provided.")

    log.success("Script execution completed successfully.")
    console.print(farewell_panel())
    return 0
