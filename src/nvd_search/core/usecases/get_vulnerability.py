from __future__ import annotations

from .search_vulnerabilities import SearchVulnerabilitiesUseCase
from ..domain.params import SearchParam


class GetVulnerabilityUseCase:
    def __init__(self, search_uc: SearchVulnerabilitiesUseCase) -> None:
        self._search_uc = search_uc

    def execute(self, cve_id: str) -> dict | None:
        results = self._search_uc.execute({SearchParam.CVE_ID: cve_id})
        if not results:
            return None
        return results[0].get("cve")
