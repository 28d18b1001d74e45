from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Sequence

from .app.container import Container
from .config.settings import AppConfig


@contextmanager
def _provide_container(config_override: AppConfig | None = None) -> Iterator[Container]:
    """Create and initialize a DI container.

    Args:
        config_override: Optional AppConfig to override default configuration.
                        If None, configuration is loaded from NVD_SEARCH_* environment
                        variables using Pydantic BaseSettings.
    """
    container = Container()
    container.config.from_pydantic(config_override or AppConfig())
    container.init_resources()
    try:
        yield container
    finally:
        container.shutdown_resources()


def search(
    *,
    config: AppConfig | None = None,
    api_key: str | None = None,
    **params: object,
) -> Sequence[dict]:
    """One-shot search; see NvdClient.search for the accepted parameters.

    Args:
        config: Optional AppConfig to override default configuration. Takes precedence over api_key.
        api_key: Optional NVD API key. Ignored if config is provided.
        **params: Logical search parameters (cve_id, keyword_search, has_kev, ...).

    Returns:
        List of raw vulnerability dicts.
    """
    # Allow quick key override without creating full AppConfig
    if api_key and not config:
        config = AppConfig(api_key=api_key)

    with _provide_container(config) as container:
        uc = container.search_uc()
        return uc.execute(params)


def get(cve_id: str, *, config: AppConfig | None = None, api_key: str | None = None) -> dict | None:
    """Return the 'cve' record for cve_id, or None if not found."""
    if api_key and not config:
        config = AppConfig(api_key=api_key)

    with _provide_container(config) as container:
        uc = container.get_uc()
        return uc.execute(cve_id)


__all__ = [
    "AppConfig",
    "search",
    "get",
]
