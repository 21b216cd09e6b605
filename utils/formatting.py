# utils/formatting.py
"""
Display helpers for solver output, using pint for the unit conversions.
Infinite values are rendered with the ∞ sign.
"""
import math

from utils.units import ureg

SHORT_CIRCUIT = "Short Circuit!"
CIRCUIT_COMPLETE = "Circuit Complete"
OPEN_CIRCUIT = "Open Circuit"


def _render(magnitude: float, base_unit: str, unit: str, digits: int) -> str:
    quantity = ureg.Quantity(magnitude, base_unit).to(unit)
    return f"{quantity.magnitude:.{digits}f} {quantity.units:~P}"


def format_current(amps: float) -> str:
    if math.isinf(amps):
        return "∞ A"
    if amps >= 1:
        return _render(amps, "ampere", "ampere", 2)
    if amps >= 0.001:
        return _render(amps, "ampere", "milliampere", 1)
    return _render(amps, "ampere", "microampere", 0)


def format_voltage(volts: float) -> str:
    if volts >= 1:
        return _render(volts, "volt", "volt", 2)
    return _render(volts, "volt", "millivolt", 1)


def format_resistance(ohms: float) -> str:
    if math.isinf(ohms):
        return "∞ Ω"
    if ohms >= 1_000_000:
        return _render(ohms, "ohm", "megaohm", 2)
    if ohms >= 1000:
        return _render(ohms, "ohm", "kiloohm", 2)
    return _render(ohms, "ohm", "ohm", 1)


def format_power(watts: float) -> str:
    if watts >= 1:
        return _render(watts, "watt", "watt", 2)
    return _render(watts, "watt", "milliwatt", 2)


def describe_state(state) -> str:
    """Status line for a CircuitState."""
    if state.has_short_circuit:
        return SHORT_CIRCUIT
    if state.is_complete:
        return CIRCUIT_COMPLETE
    return OPEN_CIRCUIT
