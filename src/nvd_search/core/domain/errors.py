from __future__ import annotations


class NvdSearchError(Exception):
    """Base class for all errors raised by nvd_search."""


class SearchParameterError(NvdSearchError, ValueError):
    """Raised before any request is sent when a search parameter is rejected.

    Attributes:
        name: Logical parameter name as passed by the caller.
    """
    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class UnknownParameter(SearchParameterError):
    def __init__(self, name: str):
        super().__init__(name, f"'{name}' is not a valid search parameter")


class InvalidParameterValue(SearchParameterError):
    """The value does not satisfy the parameter's syntax (or type for flags).

    Attributes:
        value: The rejected value, unchanged.
    """
    def __init__(self, name: str, value: object):
        super().__init__(name, f"invalid value '{value}' for '{name}'")
        self.value = value


class NvdTransportError(NvdSearchError):
    """Network, HTTP status or response decoding failure.

    Only raised when the client is configured with raise_on_transport_error=True;
    otherwise such failures surface as an empty result.
    """
