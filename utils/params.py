# utils/params.py
import logging
from typing import Any, Dict


def merge_params(*dicts: Dict[str, Any], log_level: int = logging.DEBUG) -> Dict[str, Any]:
    """
    Merge component property dictionaries left to right.

    Parameters:
        *dicts: Dictionaries to merge; later ones win.
        log_level: Logging level for override messages.

    Returns:
        A new dictionary. Values of None never override an existing value.
    """
    result: Dict[str, Any] = {}
    for d in dicts:
        for key, value in (d or {}).items():
            if key not in result:
                result[key] = value
                continue
            existing = result[key]
            if value is None or existing == value:
                continue
            logging.log(log_level, "Property '%s': %r overridden by %r.", key, existing, value)
            result[key] = value
    return result
