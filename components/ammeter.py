from core.behavior.component import Component


class AmmeterComponent(Component):
    """Ideal ammeter: zero resistance, reads the total circuit current."""
    type_name = "ammeter"
    default_params = {"label": "0 mA"}
    meter = "current"

    def resistance(self) -> float:
        return 0.0
