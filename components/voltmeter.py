import math

from core.behavior.component import Component


class VoltmeterComponent(Component):
    """Ideal voltmeter: draws no current, reads the source voltage."""
    type_name = "voltmeter"
    default_params = {"label": "0 V"}
    meter = "voltage"

    def resistance(self) -> float:
        return math.inf
