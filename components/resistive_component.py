# components/resistive_component.py
from core.behavior.component import Component, display_number
from utils.logging_config import get_logger
from utils.units import parse_quantity

logger = get_logger(__name__)


class ResistiveComponent(Component):
    """
    Shared behavior for loads with a configurable resistance
    (resistor, bulb, LED). Reads params["resistance"] in ohms.
    """
    type_name: str = "undefined"
    default_params: dict = {"resistance": 0.0}
    is_resistive_load = True

    def resistance(self) -> float:
        raw = self.params.get("resistance")
        if raw is None:
            raw = self.default_params.get("resistance", 0.0)
        try:
            value = parse_quantity(raw, "ohm")
        except ValueError as e:
            logger.debug("Resistance of %s unreadable: %s", self.id, e)
            return 0.0
        # UI clamps to >= 0; floor here as well.
        return max(0.0, value)

    def label_prefix(self) -> str:
        return ""

    def label_for(self, key, value):
        if key == "resistance":
            return f"{self.label_prefix()}{display_number(value)}Ω"
        return None
