from __future__ import annotations

import pytest

from nvd_search.core.domain.params import PARAMETERS, ParameterSpec, ParamKind, SearchParam


def test_registry_covers_every_search_param():
    assert set(PARAMETERS) == set(SearchParam)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        PARAMETERS[SearchParam.CVE_ID] = ParameterSpec.flag("cveId")  # type: ignore[index]


def test_wire_names_are_unique():
    wire_names = [spec.wire_name for spec in PARAMETERS.values()]
    assert len(wire_names) == len(set(wire_names))


def test_flag_specs_have_no_pattern():
    flags = {p for p, spec in PARAMETERS.items() if spec.kind is ParamKind.BOOLEAN}
    assert flags == {
        SearchParam.HAS_CERT_ALERTS,
        SearchParam.HAS_CERT_NOTES,
        SearchParam.HAS_KEV,
        SearchParam.HAS_OVAL,
        SearchParam.IS_VULNERABLE,
        SearchParam.KEYWORD_EXACT_MATCH,
        SearchParam.NO_REJECTED,
    }
    assert all(PARAMETERS[p].pattern is None for p in flags)


def test_spec_invariant_pattern_iff_valued():
    with pytest.raises(ValueError):
        ParameterSpec(wire_name="x", kind=ParamKind.VALUED)


def test_accepts_is_full_match():
    spec = ParameterSpec.valued("cweId", r"CWE-[0-9]+")
    assert spec.accepts("CWE-79")
    assert not spec.accepts("CWE-79x")
    assert not spec.accepts("xCWE-79")


def test_lookup():
    assert SearchParam.lookup("no_rejected") is SearchParam.NO_REJECTED
    assert SearchParam.lookup("noRejected") is None
