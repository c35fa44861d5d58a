from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


class ScriptTemplateError(Exception):
    pass


class UsageError(ScriptTemplateError):
    pass


class OpError(ScriptTemplateError):
    pass


class MissingDependencyError(ScriptTemplateError):
    """Raised when one or more required executables are not on PATH."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        names = ", ".join(self.missing)
        super().__init__(f"missing required dependencies: {names}")

    @property
    def exit_code(self) -> int:
        return len(self.missing)


SCRIPT_TEMPLATE_RELEASE_REPO = "SCRIPT_TEMPLATE_RELEASE_REPO"
SCRIPT_TEMPLATE_PUBLIC_IP_URL = "SCRIPT_TEMPLATE_PUBLIC_IP_URL"
SCRIPT_TEMPLATE_NO_INTERACTIVE = "SCRIPT_TEMPLATE_NO_INTERACTIVE"
SCRIPT_TEMPLATE_TASK_SECONDS = "SCRIPT_TEMPLATE_TASK_SECONDS"

DEFAULT_RELEASE_REPO = "charmbracelet/gum"
DEFAULT_PUBLIC_IP_URL = "https://ifconfig.me"
DEFAULT_TASK_SECONDS = 3.0


@dataclass(frozen=True)
class RunConfig:
    release_repo: str = DEFAULT_RELEASE_REPO
    public_ip_url: str = DEFAULT_PUBLIC_IP_URL
    interactive: bool = True
    task_seconds: float = DEFAULT_TASK_SECONDS


def _bootstrap_env() -> None:
    # python-dotenv defaults: discover .env upward from cwd, never override
    # values already exported in the process environment.
    load_dotenv()


def _env_or_none(*names: str) -> str | None:
    for n in names:
        v = (os.environ.get(n) or "").strip()
        if v:
            return v
    return None


def _truthy(raw: str | None) -> bool:
    return str(raw or "").strip().lower() in {"1", "true", "yes", "on"}


def _parse_seconds(raw: str | None, *, name: str) -> float:
    if raw is None:
        return DEFAULT_TASK_SECONDS
    try:
        val = float(raw)
    except ValueError as e:
        raise UsageError(f"invalid {name}: expected a number of seconds, got {raw!r}") from e
    if val < 0:
        raise UsageError(f"invalid {name}: must be >= 0, got {raw!r}")
    return val


def _run_config_from_env() -> RunConfig:
    return RunConfig(
        release_repo=_env_or_none(SCRIPT_TEMPLATE_RELEASE_REPO) or DEFAULT_RELEASE_REPO,
        public_ip_url=_env_or_none(SCRIPT_TEMPLATE_PUBLIC_IP_URL) or DEFAULT_PUBLIC_IP_URL,
        interactive=not _truthy(os.environ.get(SCRIPT_TEMPLATE_NO_INTERACTIVE)),
        task_seconds=_parse_seconds(
            _env_or_none(SCRIPT_TEMPLATE_TASK_SECONDS),
            name=SCRIPT_TEMPLATE_TASK_SECONDS,
        ),
    )
