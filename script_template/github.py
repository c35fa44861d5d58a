from __future__ import annotations

import json
import subprocess
from typing import Any, Callable

Runner = Callable[..., subprocess.CompletedProcess]

NOT_AVAILABLE = "N/A"


def gh_authenticated(*, run: Runner = subprocess.run) -> bool:
    try:
        cp = run(["gh", "auth", "status"], capture_output=True, text=True)
    except (OSError, ValueError):
        return False
    return cp.returncode == 0


def fetch_latest_release(repo: str, *, run: Runner = subprocess.run) -> dict[str, Any] | None:
    """Return the latest release document for ``owner/name``, or None.

    Anonymous access is attempted when ``gh`` is not logged in; any failure
    (non-zero exit, undecodable or empty output, non-object JSON) yields None.
    """
    try:
        cp = run(
            ["gh", "api", f"repos/{repo}/releases/latest"],
            capture_output=True,
            text=True,
        )
    except (OSError, ValueError):
        return None
    if cp.returncode != 0:
        return None
    raw = str(cp.stdout or "").strip()
    if not raw:
        return None
    try:
        doc = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(doc, dict) or not doc:
        return None
    return doc


def _field_or_na(doc: dict[str, Any], key: str) -> str:
    val = doc.get(key)
    if val is None or val is False or val == "":
        return NOT_AVAILABLE
    return str(val)


def release_summary(doc: dict[str, Any]) -> tuple[str, str]:
    return _field_or_na(doc, "tag_name"), _field_or_na(doc, "html_url")


def repo_short_name(repo: str) -> str:
    return str(repo or "").rstrip("/").rsplit("/", 1)[-1]
