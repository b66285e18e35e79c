import re
from typing import Any, List, Mapping, Tuple
from urllib.parse import urlencode

INDEX_PATTERN = re.compile(r'%5B[0-9]+%5D', re.IGNORECASE)


def _flatten(prefix: str, value: Any) -> List[Tuple[str, str]]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        items = list(value.items())
    elif isinstance(value, (list, tuple)):
        items = list(enumerate(value))
    else:
        if isinstance(value, bool):
            value = int(value)
        return [(prefix, str(value))]

    pairs = []
    for key, item in items:
        pairs.extend(_flatten(f'{prefix}[{key}]', item))
    return pairs


def build_query(payload: Mapping[str, Any]) -> str:
    """Form encode nested mappings and lists with bracket keys.

    >>> build_query({'reports': [{'name': 'identity'}]})
    'reports%5B0%5D%5Bname%5D=identity'
    """
    pairs = []
    for key, value in payload.items():
        pairs.extend(_flatten(str(key), value))
    return urlencode(pairs)


def clean_query(query_string: str) -> str:
    """Replace numeric indexes in square brackets with empty brackets."""
    return INDEX_PATTERN.sub('%5B%5D', query_string)


def encode_payload(payload: Mapping[str, Any]) -> str:
    return clean_query(build_query(payload))
