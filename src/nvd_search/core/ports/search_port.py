from __future__ import annotations

from typing import Protocol, Sequence

from ..domain.params import TranslatedQuery


class VulnerabilitySearchPort(Protocol):
    def search(self, query: TranslatedQuery) -> Sequence[dict]:
        """Run one query against the remote service and return its raw vulnerability records.

        Implementations receive an already validated query and must not re-validate it.
        """
        ...
