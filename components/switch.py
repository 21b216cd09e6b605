import math

from core.behavior.component import Component


class SwitchComponent(Component):
    type_name = "switch"
    default_params = {"is_on": True, "label": "Switch ON"}

    @property
    def is_closed(self) -> bool:
        return bool(self.params.get("is_on", True))

    @property
    def conducts(self) -> bool:
        return self.is_closed

    def resistance(self) -> float:
        return 0.0 if self.is_closed else math.inf

    def derive_is_on(self, current, config):
        return self.is_closed

    def idle_is_on(self):
        return self.is_closed

    def label_for(self, key, value):
        if key == "is_on":
            return "Switch ON" if value else "Switch OFF"
        return None
