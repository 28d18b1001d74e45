from __future__ import annotations

from typing import Sequence

from .container import Container
from ..config.settings import AppConfig


class NvdClient:
    """Client for the NVD CVE API.

    The HTTP client is created once and reused across calls. Parameters are
    validated before any request is sent; see SearchParam for the accepted names.

    Example:
        with NvdClient() as nvd:
            cve = nvd.get("CVE-2019-1010218")
            cves = nvd.search(
                keyword_search="perl cpan",
                last_mod_start_date="2023-01-15T13:00:00.000-03:00",
                last_mod_end_date="2023-03-15T13:00:00.000-03:00",
                no_rejected=True,
            )

        # Authenticated, failing loudly on network errors
        with NvdClient(api_key="...", raise_on_transport_error=True) as nvd:
            cves = nvd.search(has_kev=True, results_per_page=100)
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        raise_on_transport_error: bool | None = None,
    ):
        """Initialize the NVD client.

        Args:
            api_key: Optional NVD API key, sent as the 'apiKey' header.
                     If None, uses NVD_SEARCH_API_KEY environment variable.
            base_url: Optional CVE API endpoint. Defaults to the public NVD 2.0 endpoint.
            timeout_seconds: Optional per-request timeout (default: 30).
            raise_on_transport_error: If True, network/HTTP failures raise NvdTransportError.
                                      By default they yield an empty result.
        """
        self._container = Container()

        config_dict = {}
        if api_key is not None:
            config_dict["api_key"] = api_key
        if base_url is not None:
            config_dict["base_url"] = base_url
        if timeout_seconds is not None:
            config_dict["timeout_seconds"] = timeout_seconds
        if raise_on_transport_error is not None:
            config_dict["raise_on_transport_error"] = raise_on_transport_error

        # Always build AppConfig here: unset fields come from the environment as it is now
        self._container.config.from_pydantic(AppConfig(**config_dict))

        self._container.init_resources()

    def search(self, **params: object) -> Sequence[dict]:
        """Query the CVE API and return the raw 'vulnerabilities' entries.

        Args:
            **params: Logical search parameters, e.g. cve_id, keyword_search, pub_start_date,
                      results_per_page, no_rejected=True. Flags take True/False.
                      Pagination is up to the caller (start_index / results_per_page).
                      Paired dates and is_vulnerable + cpe_name are not cross-checked.

        Returns:
            List of vulnerability dicts (each with a 'cve' key); empty when nothing matched
            or, unless raise_on_transport_error is set, when the request failed.

        Raises:
            UnknownParameter: A parameter name is not recognised.
            InvalidParameterValue: A parameter value is malformed.
            NvdTransportError: Only with raise_on_transport_error=True.
        """
        uc = self._container.search_uc()
        return uc.execute(params)

    def get(self, cve_id: str) -> dict | None:
        """Return the 'cve' record for a single CVE id, or None if not found.

        Shortcut for search(cve_id=cve_id)[0]["cve"].
        """
        uc = self._container.get_uc()
        return uc.execute(cve_id)

    def close(self) -> None:
        """Close the client and release the underlying HTTP connection pool."""
        self._container.shutdown_resources()

    def __enter__(self) -> NvdClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "NvdClient",
    "AppConfig",
]
