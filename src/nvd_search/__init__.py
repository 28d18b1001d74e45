"""nvd_search package: app/core/infra/config.

Expose library-friendly API client at the package level.
"""

from .app.api import AppConfig, NvdClient
from .core.domain.enums import Severity, VersionBoundType
from .core.domain.errors import (
    InvalidParameterValue,
    NvdSearchError,
    NvdTransportError,
    SearchParameterError,
    UnknownParameter,
)
from .core.domain.params import SearchParam, TranslatedQuery
from .core.services.query_translator import build_query_string, translate

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "NvdClient",
    "AppConfig",
    "SearchParam",
    "Severity",
    "VersionBoundType",
    "TranslatedQuery",
    "translate",
    "build_query_string",
    "NvdSearchError",
    "SearchParameterError",
    "UnknownParameter",
    "InvalidParameterValue",
    "NvdTransportError",
]
