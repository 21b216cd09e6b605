# utils/units.py
import math
from typing import Optional, Union

import pint

ureg = pint.UnitRegistry()

INFINITE_ALIASES = {"inf", "+inf", "infinity", "infinite", "∞", "open"}


def parse_quantity(value: Union[int, float, str], unit: Optional[str] = None) -> float:
    """
    Parse a number or a quantity string and return its magnitude.

    :param value: A number, or a string such as "4.7 kohm", "9 V", "20mA" or "inf".
    :param unit: Target unit for dimensioned strings (e.g. "ohm"). Plain numbers
                 and dimensionless strings are taken as already expressed in it.
    :return: The magnitude as a float; infinite aliases give math.inf.
    :raises ValueError: If the value cannot be parsed or has the wrong dimension.
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a quantity, got boolean {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if text.lower() in INFINITE_ALIASES:
        return math.inf
    try:
        quantity = ureg.Quantity(text)
        if unit is not None and not quantity.dimensionless:
            quantity = quantity.to(unit)
        elif unit is None:
            quantity = quantity.to_base_units()
        return float(quantity.magnitude)
    except Exception as e:
        raise ValueError(f"Could not parse '{value}' as a quantity: {e}")
