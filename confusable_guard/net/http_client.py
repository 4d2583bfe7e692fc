# confusable_guard/net/http_client.py
from __future__ import annotations

import logging
from typing import Iterator, Optional

import httpx

from confusable_guard.config import get_settings
from confusable_guard.errors import DataFetchError

log = logging.getLogger(__name__)


def get_http_client(transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    timeout = get_settings().HTTPX_TIMEOUT_S
    return httpx.Client(timeout=timeout, transport=transport, follow_redirects=True)


def fetch_lines(url: str, client: Optional[httpx.Client] = None) -> Iterator[str]:
    """Download ``url`` and return its text lines.

    Raises ``DataFetchError`` on transport failures and non-200 responses.
    """
    owned = client is None
    http = client or get_http_client()
    try:
        resp = http.get(url)
    except httpx.HTTPError as exc:
        raise DataFetchError(f"unable to download {url}: {exc}") from exc
    finally:
        if owned:
            http.close()
    if resp.status_code != 200:
        raise DataFetchError(f"unable to download {url}: HTTP {resp.status_code}")
    log.info("downloaded %s (%d bytes)", url, len(resp.content))
    return iter(resp.text.splitlines())
