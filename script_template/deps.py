from __future__ import annotations

import shutil
from typing import Callable, Sequence

from .cli_shared import MissingDependencyError
from .log import Logger

# Executables the workflow shells out to.
REQUIRED_TOOLS: tuple[str, ...] = ("gh",)


def find_missing(
    tools: Sequence[str],
    *,
    which: Callable[[str], str | None] = shutil.which,
) -> list[str]:
    seen: set[str] = set()
    missing: list[str] = []
    for tool in tools:
        if tool in seen:
            continue
        seen.add(tool)
        if not which(tool):
            missing.append(tool)
    return missing


def check_dependencies(
    tools: Sequence[str],
    log: Logger,
    *,
    which: Callable[[str], str | None] = shutil.which,
) -> None:
    """Fail unless every tool in ``tools`` resolves on PATH.

    Every missing tool is reported before raising, not just the first.
    """
    missing = find_missing(tools, which=which)
    for dep in missing:
        log.error(f"Required dependency '{dep}' is not installed. Please install it.")
    if missing:
        raise MissingDependencyError(missing)
    log.debug(f"All dependencies ({' '.join(tools)}) are present.")
