from core.behavior.component import Component


class WireComponent(Component):
    """Junction/conductor piece placed on the canvas; zero resistance."""
    type_name = "wire"
    default_params = {"label": "Node"}

    def resistance(self) -> float:
        return 0.0
