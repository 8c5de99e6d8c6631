"""Single-shot JSON GET over :mod:`requests` with typed failures.

No retries: each call is one best-effort attempt, and the caller decides
what a failure means for the user.
"""

from __future__ import annotations

from typing import Any

import requests

from jokebox.core.errors import MalformedResponse, NonSuccessStatus, TransportFailure
from jokebox.net.error_utils import summarize_error

USER_AGENT = "Jokebox/1.0"


def fetch_json(
    url: str,
    *,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout: float = 6.0,
) -> Any:
    """GET *url* and return parsed JSON.

    Args:
        url: Full URL to fetch.
        params: Query-string parameters.
        headers: Extra HTTP headers (``User-Agent`` is always set).
        timeout: Request timeout in seconds.

    Returns:
        Parsed JSON (dict or list).

    Raises:
        TransportFailure: The request never produced a response.
        NonSuccessStatus: The response status is not 200.
        MalformedResponse: The body is not JSON.
    """
    hdrs = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    if headers:
        hdrs.update(headers)

    try:
        resp = requests.get(url, params=params, headers=hdrs, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportFailure(summarize_error(exc)) from exc

    if resp.status_code != 200:
        raise NonSuccessStatus(resp.status_code, getattr(resp, "reason", "") or "")

    try:
        return resp.json()
    except ValueError as exc:
        raise MalformedResponse("Response body is not valid JSON") from exc
