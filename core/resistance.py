# core/resistance.py
"""
Resistance model: maps a component and its current properties to the
effective resistance used by the graph, topology and branch analysis.
"""
import math

from utils.logging_config import get_logger

logger = get_logger(__name__)


def effective_resistance(component) -> float:
    """
    Effective resistance of a component in ohms.

    Never raises: unreadable, negative or NaN values floor to 0.
    Open switches and voltmeters report math.inf.
    """
    try:
        value = float(component.resistance())
    except (TypeError, ValueError) as e:
        logger.debug("Component %s has unusable resistance (%s); using 0.", component.id, e)
        return 0.0
    if math.isnan(value) or value < 0:
        return 0.0
    return value
