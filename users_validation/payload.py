"""
Typed accessors over untyped request payloads.

Requests are plain dictionaries decoded from JSON, so any key may hold any
kind of value. Rules read fields through these helpers: each returns the
value when it has the expected kind (or is absent/null) and raises a
DATA_TYPE_ERROR naming the field otherwise.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .errors import ValidationError
from .keys import LIST, MAP, STRING, BOOLEAN
from .predicates import is_list_type
from .response_codes import ResponseCode


class ValueKind(Enum):
    """Kinds of value a decoded JSON payload can hold."""

    NULL = 'null'
    BOOL = 'bool'
    STR = 'str'
    NUMBER = 'number'
    LIST = 'list'
    MAP = 'map'
    OTHER = 'other'


def kind_of(value: Any) -> ValueKind:
    # bool is checked before numbers because bool subclasses int
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, str):
        return ValueKind.STR
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, Mapping):
        return ValueKind.MAP
    return ValueKind.OTHER


def _type_error(field: str, type_name: str) -> ValidationError:
    return ValidationError(ResponseCode.DATA_TYPE_ERROR, field, type_name)


def get_str(data: Mapping[str, Any], field: str) -> Optional[str]:
    """Read a string field; None when absent or null."""
    value = data.get(field)
    if kind_of(value) not in (ValueKind.NULL, ValueKind.STR):
        raise _type_error(field, STRING)
    return value


def get_bool(data: Mapping[str, Any], field: str) -> Optional[bool]:
    """Read a boolean field; None when absent or null."""
    value = data.get(field)
    if kind_of(value) not in (ValueKind.NULL, ValueKind.BOOL):
        raise _type_error(field, BOOLEAN)
    return value


def get_list(data: Mapping[str, Any], field: str) -> Optional[List[Any]]:
    """Read a list field; None when absent or null."""
    value = data.get(field)
    if value is not None and not is_list_type(value):
        raise _type_error(field, LIST)
    return value


def get_mapping(data: Mapping[str, Any], field: str) -> Optional[Mapping[str, Any]]:
    """Read a nested object field; None when absent or null."""
    value = data.get(field)
    if kind_of(value) not in (ValueKind.NULL, ValueKind.MAP):
        raise _type_error(field, MAP)
    return value


def get_mapping_list(data: Mapping[str, Any], field: str) -> Optional[List[Dict[str, Any]]]:
    """Read a list of nested objects; every element must be an object."""
    entries = get_list(data, field)
    if entries is None:
        return None
    for entry in entries:
        if kind_of(entry) is not ValueKind.MAP:
            raise _type_error(field, f'{LIST} of {MAP}')
    return entries


def get_str_list(data: Mapping[str, Any], field: str) -> Optional[List[str]]:
    """Read a list of strings, such as field names."""
    values = get_list(data, field)
    if values is None:
        return None
    for value in values:
        if kind_of(value) is not ValueKind.STR:
            raise _type_error(field, f'{LIST} of {STRING}')
    return values
