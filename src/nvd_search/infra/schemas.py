from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class NvdCveResponse(BaseModel):
	"""Top-level envelope of the CVE API 2.0 response.

	Individual vulnerability entries are kept as raw dicts; only their container is checked.
	"""
	resultsPerPage: Optional[int] = None
	startIndex: Optional[int] = None
	totalResults: Optional[int] = None
	format: Optional[str] = None
	version: Optional[str] = None
	timestamp: Optional[str] = None
	vulnerabilities: list[dict[str, Any]] = Field(default_factory=list)
