from core.behavior.component import Component


class GroundComponent(Component):
    type_name = "ground"
    default_params = {"label": "GND"}

    def resistance(self) -> float:
        return 0.0
