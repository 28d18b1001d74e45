from __future__ import annotations

from typing import Mapping, Optional

import httpx

from ..config.settings import USER_AGENT


class HttpClient:
    def __init__(
        self,
        base_headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        headers = {"User-Agent": USER_AGENT}
        headers.update(base_headers or {})
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers=headers,
            verify=True,
            follow_redirects=True,
            max_redirects=10
        )

    def get_json(self, url: str) -> dict:
        resp = self._client.get(url)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise TypeError("HttpClient invariant violated: expected JSON object")
        return data

    def close(self) -> None:
        self._client.close()
