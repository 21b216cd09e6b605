from components.resistive_component import ResistiveComponent


class BulbComponent(ResistiveComponent):
    """
    Incandescent bulb: a resistive load that glows once the current through
    it reaches config.bulb_min_current.
    """
    type_name = "bulb"
    default_params = {"resistance": 50.0, "is_on": False, "label": "Bulb 50Ω"}
    derived_params = ("is_on",)

    def label_prefix(self) -> str:
        return "Bulb "

    def derive_is_on(self, current, config):
        return current >= config.bulb_min_current

    def idle_is_on(self):
        return False
