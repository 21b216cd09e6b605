from core.behavior.component import Component, display_number
from utils.logging_config import get_logger
from utils.units import parse_quantity

logger = get_logger(__name__)


class BatteryComponent(Component):
    """
    Ideal DC source. The right terminal is source+, the left terminal source-.
    """
    type_name = "battery"
    default_params = {"voltage": 9.0, "label": "9V"}
    is_source = True

    @property
    def voltage(self) -> float:
        raw = self.params.get("voltage")
        if raw is None:
            raw = self.default_params["voltage"]
        try:
            return parse_quantity(raw, "volt")
        except ValueError as e:
            logger.debug("Voltage of %s unreadable: %s", self.id, e)
            return 0.0

    def resistance(self) -> float:
        return 0.0

    def label_for(self, key, value):
        if key == "voltage":
            return f"{display_number(value)}V"
        return None
