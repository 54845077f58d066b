"""Lightweight HTTP client util: GET JSON with limited retries.

Uses stdlib urllib; callers run it in a worker thread when they must not
block the event loop.
"""

from __future__ import annotations

import http.client
import json
import logging
import time
import urllib.request
import urllib.error
from typing import Any, Dict, Optional

logger = logging.getLogger("projectcalc.http")


class HttpError(Exception):
    pass


def get_json(
    url: str, *, timeout: float = 5.0, retries: int = 0, backoff: float = 0.5
) -> Dict[str, Any]:
    last_err: Optional[Exception] = None
    for attempt in range(retries + 1):
        try:
            req = urllib.request.Request(url, headers={"Accept": "application/json"})
            with urllib.request.urlopen(req, timeout=timeout) as resp:  # nosec B310
                if resp.status >= 400:
                    raise HttpError(f"HTTP {resp.status} for {url}")
                data = json.loads(resp.read().decode("utf-8"))
                if not isinstance(data, dict):
                    raise HttpError(f"Expected a JSON object from {url}")
                return data
        except (
            urllib.error.URLError,
            http.client.HTTPException,
            OSError,
            HttpError,
            ValueError,
        ) as e:  # ValueError for JSON decode
            last_err = e
            logger.debug(
                "GET failed", extra={"context": {"url": url, "attempt": attempt + 1}}
            )
            if attempt == retries:
                break
            time.sleep(backoff * (2**attempt))
    raise HttpError(f"Failed to fetch JSON from {url}: {last_err}")
