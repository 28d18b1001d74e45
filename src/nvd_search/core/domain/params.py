from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .enums import Severity, VersionBoundType


class ParamKind(Enum):
    BOOLEAN = "boolean"  # bare flag on the wire, present only when True
    VALUED = "valued"  # wireName=value, value validated by pattern


class SearchParam(str, Enum):
    """Logical search parameter names accepted by NvdClient.search()."""

    CPE_NAME = "cpe_name"
    CVE_ID = "cve_id"
    CVSS_V2_METRICS = "cvssv2_metrics"
    CVSS_V2_SEVERITY = "cvssV2Severity"
    CVSS_V3_METRICS = "cvssv3_metrics"
    CVSS_V3_SEVERITY = "cvssv3_severity"
    CWE_ID = "cwe_id"
    KEYWORD_SEARCH = "keyword_search"
    LAST_MOD_START_DATE = "last_mod_start_date"
    LAST_MOD_END_DATE = "last_mod_end_date"
    PUB_START_DATE = "pub_start_date"
    PUB_END_DATE = "pub_end_date"
    RESULTS_PER_PAGE = "results_per_page"
    START_INDEX = "start_index"
    SOURCE_IDENTIFIER = "source_identifier"
    VERSION_END = "version_end"
    VERSION_END_TYPE = "version_end_type"
    VERSION_START = "version_start"
    VERSION_START_TYPE = "version_start_type"
    VIRTUAL_MATCH_STRING = "virtual_match_string"
    HAS_CERT_ALERTS = "has_cert_alerts"
    HAS_CERT_NOTES = "has_cert_notes"
    HAS_KEV = "has_kev"
    HAS_OVAL = "has_oval"
    IS_VULNERABLE = "is_vulnerable"
    KEYWORD_EXACT_MATCH = "keyword_exact_match"
    NO_REJECTED = "no_rejected"

    @classmethod
    def lookup(cls, name: str) -> Optional["SearchParam"]:
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class ParameterSpec:
    wire_name: str
    kind: ParamKind
    pattern: Optional[re.Pattern[str]] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if (self.kind is ParamKind.VALUED) != (self.pattern is not None):
            raise ValueError(f"ParameterSpec invariant violated for {self.wire_name}: pattern iff valued")

    @staticmethod
    def flag(wire_name: str) -> "ParameterSpec":
        return ParameterSpec(wire_name=wire_name, kind=ParamKind.BOOLEAN)

    @staticmethod
    def valued(wire_name: str, pattern: str) -> "ParameterSpec":
        return ParameterSpec(wire_name=wire_name, kind=ParamKind.VALUED, pattern=re.compile(pattern))

    @property
    def is_flag(self) -> bool:
        return self.kind is ParamKind.BOOLEAN

    def accepts(self, value: str) -> bool:
        """Return True when value matches the whole pattern (not a substring)."""
        return self.pattern is not None and self.pattern.fullmatch(value) is not None


def _one_of(values) -> str:
    return "(?:" + "|".join(re.escape(v.value) for v in values) + ")"


ISO_8601_RE = r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(?:\.[0-9]{3})?(?:[+-][0-9]{2}:[0-9]{2})?"
CPE_23_RE = r"cpe:2\.3(?::[^*:]+){4}(?::[^:]+){7}"
CVE_ID_RE = r"CVE-[0-9]{4}-[0-9]+"
CWE_ID_RE = r"CWE-[0-9]+"
UINT_RE = r"[0-9]+"
NON_EMPTY_RE = r"(?s).+"
VERSION_BOUND_RE = _one_of(VersionBoundType)


PARAMETERS: Mapping[SearchParam, ParameterSpec] = MappingProxyType({
    SearchParam.CPE_NAME:             ParameterSpec.valued("cpeName", CPE_23_RE),
    SearchParam.CVE_ID:               ParameterSpec.valued("cveId", CVE_ID_RE),
    SearchParam.CVSS_V2_METRICS:      ParameterSpec.valued("cvssV2Metrics", NON_EMPTY_RE),
    SearchParam.CVSS_V2_SEVERITY:     ParameterSpec.valued("cvssV2Severity", _one_of(Severity.cvss_v2_levels())),
    SearchParam.CVSS_V3_METRICS:      ParameterSpec.valued("cvssV3Metrics", NON_EMPTY_RE),
    SearchParam.CVSS_V3_SEVERITY:     ParameterSpec.valued("cvssV3Severity", _one_of(Severity.cvss_v3_levels())),
    SearchParam.CWE_ID:               ParameterSpec.valued("cweId", CWE_ID_RE),
    SearchParam.KEYWORD_SEARCH:       ParameterSpec.valued("keywordSearch", NON_EMPTY_RE),
    SearchParam.LAST_MOD_START_DATE:  ParameterSpec.valued("lastModStartDate", ISO_8601_RE),
    SearchParam.LAST_MOD_END_DATE:    ParameterSpec.valued("lastModEndDate", ISO_8601_RE),
    SearchParam.PUB_START_DATE:       ParameterSpec.valued("pubStartDate", ISO_8601_RE),
    SearchParam.PUB_END_DATE:         ParameterSpec.valued("pubEndDate", ISO_8601_RE),
    SearchParam.RESULTS_PER_PAGE:     ParameterSpec.valued("resultsPerPage", UINT_RE),
    SearchParam.START_INDEX:          ParameterSpec.valued("startIndex", UINT_RE),
    SearchParam.SOURCE_IDENTIFIER:    ParameterSpec.valued("sourceIdentifier", NON_EMPTY_RE),
    SearchParam.VERSION_END:          ParameterSpec.valued("versionEnd", NON_EMPTY_RE),
    SearchParam.VERSION_END_TYPE:     ParameterSpec.valued("versionEndType", VERSION_BOUND_RE),
    SearchParam.VERSION_START:        ParameterSpec.valued("versionStart", NON_EMPTY_RE),
    SearchParam.VERSION_START_TYPE:   ParameterSpec.valued("versionStartType", VERSION_BOUND_RE),
    SearchParam.VIRTUAL_MATCH_STRING: ParameterSpec.valued("virtualMatchString", NON_EMPTY_RE),
    SearchParam.HAS_CERT_ALERTS:      ParameterSpec.flag("hasCertAlerts"),
    SearchParam.HAS_CERT_NOTES:       ParameterSpec.flag("hasCertNotes"),
    SearchParam.HAS_KEV:              ParameterSpec.flag("hasKev"),
    SearchParam.HAS_OVAL:             ParameterSpec.flag("hasOval"),
    SearchParam.IS_VULNERABLE:        ParameterSpec.flag("isVulnerable"),
    SearchParam.KEYWORD_EXACT_MATCH:  ParameterSpec.flag("keywordExactMatch"),
    SearchParam.NO_REJECTED:          ParameterSpec.flag("noRejected"),
})


@dataclass(frozen=True)
class TranslatedQuery:
    """Wire-ready query: bare flag names plus wireName -> validated value."""

    flags: frozenset[str] = field(default_factory=frozenset)
    valued: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.flags and not self.valued
