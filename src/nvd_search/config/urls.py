from __future__ import annotations


NVD_CVE_API_URL = "https://services.nvd.nist.gov/rest/json/cves/2.0"


def get_cve_search_url(query_string: str, base_url: str = NVD_CVE_API_URL) -> str:
    if not query_string:
        return base_url
    return f"{base_url}?{query_string}"
