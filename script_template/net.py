from __future__ import annotations

from http.client import HTTPException
from typing import Callable
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .cli_shared import OpError
from .github import NOT_AVAILABLE


def _http_request(
    *,
    method: str,
    url: str,
    headers: dict[str, str],
    body: bytes | None = None,
    timeout_seconds: int = 30,
) -> tuple[int, dict[str, str], bytes]:
    req = Request(url, data=body, method=str(method).upper())
    for k, v in headers.items():
        req.add_header(k, v)
    try:
        with urlopen(req, timeout=timeout_seconds) as resp:
            status = getattr(resp, "status", 200)
            hdrs = {k.lower(): v for k, v in dict(resp.headers).items()}
            data = resp.read()
            return int(status), hdrs, data
    except HTTPError as e:
        hdrs = {k.lower(): v for k, v in dict(e.headers).items()}
        data = e.read() if hasattr(e, "read") else b""
        return int(getattr(e, "code", 0) or 0), hdrs, data
    except (URLError, OSError, HTTPException) as e:
        raise OpError(f"http request failed: {e}") from e


def fetch_public_ip(
    url: str,
    *,
    request: Callable[..., tuple[int, dict[str, str], bytes]] = _http_request,
) -> str:
    try:
        status, _hdrs, raw = request(
            method="GET",
            url=url,
            headers={"Accept": "text/plain", "User-Agent": "curl/8"},
        )
    except (OpError, ValueError):
        return NOT_AVAILABLE
    if status < 200 or status >= 300:
        return NOT_AVAILABLE
    text = raw.decode("utf-8", errors="replace").strip()
    return text or NOT_AVAILABLE
