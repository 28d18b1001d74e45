from __future__ import annotations

from typing import Mapping, Sequence

from ..ports.search_port import VulnerabilitySearchPort
from ..services.query_translator import translate


class SearchVulnerabilitiesUseCase:
    def __init__(self, search: VulnerabilitySearchPort) -> None:
        self._search = search

    def execute(self, params: Mapping[str, object]) -> Sequence[dict]:
        # Validation errors propagate before the port is touched
        query = translate(params)
        return self._search.search(query)
