from __future__ import annotations

import logging
from typing import Sequence

import httpx
from pydantic import ValidationError

from ..config.urls import NVD_CVE_API_URL, get_cve_search_url
from ..core.domain.errors import NvdTransportError
from ..core.domain.params import TranslatedQuery
from ..core.ports.search_port import VulnerabilitySearchPort
from ..core.services.query_translator import build_query_string
from .http_client import HttpClient
from .schemas import NvdCveResponse

logger = logging.getLogger(__name__)


class NvdAdapter(VulnerabilitySearchPort):
    def __init__(
        self,
        http_client: HttpClient,
        base_url: str = NVD_CVE_API_URL,
        raise_on_transport_error: bool = False,
    ) -> None:
        self._http = http_client
        self._base_url = base_url
        self._strict = raise_on_transport_error

    def search(self, query: TranslatedQuery) -> Sequence[dict]:
        url = get_cve_search_url(build_query_string(query), base_url=self._base_url)
        logger.debug(f"GET {url}")
        try:
            payload = self._http.get_json(url)
            response = NvdCveResponse.model_validate(payload)
        except (httpx.HTTPError, ValidationError, ValueError, TypeError) as e:
            # ValueError covers JSON decoding; TypeError a non-object body
            if self._strict:
                raise NvdTransportError(f"NVD request failed: {url}: {e}") from e
            logger.warning(f"NVD request failed, returning no results: {e}")
            return []
        logger.debug(f"NVD returned {len(response.vulnerabilities)} of {response.totalResults} results")
        return response.vulnerabilities
