from __future__ import annotations

import logging

from dependency_injector import containers, providers

from ..core.usecases.get_vulnerability import GetVulnerabilityUseCase
from ..core.usecases.search_vulnerabilities import SearchVulnerabilitiesUseCase
from ..infra.http_client import HttpClient
from ..infra.nvd_adapter import NvdAdapter

logger = logging.getLogger(__name__)


def http_client_resource(api_key, timeout_seconds):
	"""Create the shared HTTP client, sending the API key as a header when configured."""
	logger.info("Initializing NVD HTTP client")

	headers = {}
	if api_key:
		key_preview = f"{api_key[:4]}..." if len(api_key) > 4 else "***"
		logger.info(f"NVD API key found: {key_preview} (length: {len(api_key)})")
		headers["apiKey"] = api_key
	else:
		logger.info("No NVD API key configured - using public rate limit")

	client = HttpClient(base_headers=headers, timeout_seconds=timeout_seconds)
	try:
		yield client
	finally:
		logger.debug("Closing NVD HTTP client")
		client.close()


class Container(containers.DeclarativeContainer):
	# Filled per instance with from_pydantic(AppConfig(...)) so NVD_SEARCH_* is read at construction
	config = providers.Configuration()

	http_client = providers.Resource(
		http_client_resource,
		api_key=config.api_key,
		timeout_seconds=config.timeout_seconds,
	)

	search_port = providers.Factory(
		NvdAdapter,
		http_client=http_client,
		base_url=config.base_url,
		raise_on_transport_error=config.raise_on_transport_error,
	)

	search_uc = providers.Factory(SearchVulnerabilitiesUseCase, search=search_port)
	get_uc = providers.Factory(GetVulnerabilityUseCase, search_uc=search_uc)
