from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping
from urllib.parse import urlencode

from ..domain.errors import InvalidParameterValue, UnknownParameter
from ..domain.params import PARAMETERS, SearchParam, TranslatedQuery

logger = logging.getLogger(__name__)


def _coerce_text(name: str, value: object) -> str:
    """Return the string form of a valued parameter, or raise.

    Enum members contribute their value and ints their decimal form; anything
    else that is not already a string is rejected rather than str()-ed.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        raise InvalidParameterValue(name, value)
    if isinstance(value, int):
        return str(value)
    if not isinstance(value, str):
        raise InvalidParameterValue(name, value)
    return value


def translate(params: Mapping[str, object]) -> TranslatedQuery:
    """Validate logical search parameters and map them to NVD wire names.

    Args:
        params: Logical name (str or SearchParam) -> value. Boolean parameters take
                a real bool; valued parameters take a str (int and Enum members
                are accepted and converted).

    Returns:
        TranslatedQuery with the flags that are set and the validated values.

    Raises:
        UnknownParameter: A name is not a known search parameter.
        InvalidParameterValue: A value has the wrong type or does not match its pattern.
    """
    flags: set[str] = set()
    valued: dict[str, str] = {}

    for raw_name, value in params.items():
        name = raw_name.value if isinstance(raw_name, SearchParam) else raw_name
        param = SearchParam.lookup(name)
        if param is None:
            raise UnknownParameter(name)
        spec = PARAMETERS[param]

        if spec.is_flag:
            if not isinstance(value, bool):
                raise InvalidParameterValue(name, value)
            if value:
                flags.add(spec.wire_name)
            continue

        text = _coerce_text(name, value)
        if not spec.accepts(text):
            raise InvalidParameterValue(name, value)
        valued[spec.wire_name] = text

    query = TranslatedQuery(flags=frozenset(flags), valued=valued)
    logger.debug(f"Translated search parameters: flags={sorted(query.flags)} valued={query.valued}")
    return query


def build_query_string(query: TranslatedQuery) -> str:
    """Assemble the URL query: bare flag tokens first, then form-encoded pairs.

    Both groups are sorted so the same query always yields the same string.
    """
    if query.is_empty:
        return ""
    parts = sorted(query.flags)
    if query.valued:
        parts.append(urlencode(sorted(query.valued.items())))
    return "&".join(parts)
