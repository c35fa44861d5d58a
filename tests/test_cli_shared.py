from __future__ import annotations

import pytest

from script_template.cli_shared import (
    DEFAULT_PUBLIC_IP_URL,
    DEFAULT_RELEASE_REPO,
    MissingDependencyError,
    RunConfig,
    UsageError,
    _run_config_from_env,
    _truthy,
)

_ENV_NAMES = (
    "SCRIPT_TEMPLATE_RELEASE_REPO",
    "SCRIPT_TEMPLATE_PUBLIC_IP_URL",
    "SCRIPT_TEMPLATE_NO_INTERACTIVE",
    "SCRIPT_TEMPLATE_TASK_SECONDS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_run_config_defaults() -> None:
    cfg = _run_config_from_env()
    assert cfg == RunConfig()
    assert cfg.release_repo == DEFAULT_RELEASE_REPO
    assert cfg.public_ip_url == DEFAULT_PUBLIC_IP_URL
    assert cfg.interactive is True
    assert cfg.task_seconds == 3.0


def test_run_config_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("SCRIPT_TEMPLATE_RELEASE_REPO", " cli/cli ")
    monkeypatch.setenv("SCRIPT_TEMPLATE_PUBLIC_IP_URL", "https://ip.example")
    monkeypatch.setenv("SCRIPT_TEMPLATE_NO_INTERACTIVE", "yes")
    monkeypatch.setenv("SCRIPT_TEMPLATE_TASK_SECONDS", "0.5")
    cfg = _run_config_from_env()
    assert cfg == RunConfig(
        release_repo="cli/cli",
        public_ip_url="https://ip.example",
        interactive=False,
        task_seconds=0.5,
    )


@pytest.mark.parametrize("raw", ["soon", "-1"])
def test_invalid_task_seconds_is_usage_error(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("SCRIPT_TEMPLATE_TASK_SECONDS", raw)
    with pytest.raises(UsageError) as exc:
        _run_config_from_env()
    assert "SCRIPT_TEMPLATE_TASK_SECONDS" in str(exc.value)


def test_truthy() -> None:
    for raw in ("1", "true", "YES", " on "):
        assert _truthy(raw) is True
    for raw in (None, "", "0", "no", "off", "maybe"):
        assert _truthy(raw) is False


def test_missing_dependency_exit_code_counts_missing_tools() -> None:
    err = MissingDependencyError(["gh", "jq"])
    assert err.exit_code == 2
    assert err.missing == ["gh", "jq"]
    assert "gh, jq" in str(err)
