"""
Typed field readers over an untyped arguments mapping.

Each reader returns the typed value, or None when the key is absent or holds a
value of the wrong shape. Callers decide whether None means "use the default"
or "missing required parameter".
"""

import math
from typing import Any, Dict, List, Mapping, Optional


def get_str(args: Mapping[str, Any], key: str) -> Optional[str]:
    """Read a text field."""
    value = args.get(key)
    if isinstance(value, str):
        return value
    return None


def get_int(args: Mapping[str, Any], key: str) -> Optional[int]:
    """
    Read a whole-number field

    JSON numbers arrive as floats (or ints); the value is truncated toward
    zero. Booleans and non-finite floats are not numbers here.
    """
    value = args.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return None


def get_mapping(args: Mapping[str, Any], key: str) -> Optional[Dict[str, Any]]:
    """Read a nested object field."""
    value = args.get(key)
    if isinstance(value, dict):
        return value
    return None


def get_sequence(args: Mapping[str, Any], key: str) -> Optional[List[Any]]:
    """Read an array field."""
    value = args.get(key)
    if isinstance(value, (list, tuple)):
        return list(value)
    return None
