from __future__ import annotations

import pytest

from nvd_search.core.domain.errors import InvalidParameterValue, UnknownParameter
from nvd_search.core.domain.params import TranslatedQuery
from nvd_search.core.usecases.get_vulnerability import GetVulnerabilityUseCase
from nvd_search.core.usecases.search_vulnerabilities import SearchVulnerabilitiesUseCase


class _FakeSearch:
    def __init__(self, results: list[dict]) -> None:
        self.results = results
        self.queries: list[TranslatedQuery] = []

    def search(self, query: TranslatedQuery) -> list[dict]:
        self.queries.append(query)
        return self.results


def test_search_passes_translated_query_to_port():
    port = _FakeSearch([{"cve": {"id": "CVE-2019-1010218"}}])
    uc = SearchVulnerabilitiesUseCase(search=port)
    out = uc.execute({"keyword_search": "perl cpan", "no_rejected": True})
    assert out == [{"cve": {"id": "CVE-2019-1010218"}}]
    assert port.queries == [TranslatedQuery(flags=frozenset({"noRejected"}), valued={"keywordSearch": "perl cpan"})]


@pytest.mark.parametrize(
    "params, error",
    [
        ({"bogus": "x"}, UnknownParameter),
        ({"cve_id": "bad-id"}, InvalidParameterValue),
    ],
)
def test_search_validation_errors_skip_the_port(params, error):
    port = _FakeSearch([])
    uc = SearchVulnerabilitiesUseCase(search=port)
    with pytest.raises(error):
        uc.execute(params)
    assert port.queries == []


def test_get_returns_inner_cve_of_first_result():
    port = _FakeSearch([
        {"cve": {"id": "CVE-2003-0521", "vulnStatus": "Modified"}},
        {"cve": {"id": "CVE-2003-0522"}},
    ])
    uc = GetVulnerabilityUseCase(search_uc=SearchVulnerabilitiesUseCase(search=port))
    assert uc.execute("CVE-2003-0521") == {"id": "CVE-2003-0521", "vulnStatus": "Modified"}
    assert port.queries[0].valued == {"cveId": "CVE-2003-0521"}


def test_get_returns_none_when_nothing_matches():
    uc = GetVulnerabilityUseCase(search_uc=SearchVulnerabilitiesUseCase(search=_FakeSearch([])))
    assert uc.execute("CVE-2003-0521") is None


def test_get_validates_cve_id():
    port = _FakeSearch([])
    uc = GetVulnerabilityUseCase(search_uc=SearchVulnerabilitiesUseCase(search=port))
    with pytest.raises(InvalidParameterValue):
        uc.execute("GHSA-xxxx-yyyy-zzzz")
    assert port.queries == []
