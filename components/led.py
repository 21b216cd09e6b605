from components.resistive_component import ResistiveComponent


class LEDComponent(ResistiveComponent):
    """
    Light-emitting diode modelled as a fixed resistance.

    Lit only inside the safe conduction band [led_min_current, led_max_current].
    Above the band it is rendered off; there is no separate burned-out state.
    """
    type_name = "led"
    default_params = {"resistance": 20.0, "color": "#00ff00", "is_on": False, "label": "LED"}
    derived_params = ("is_on",)

    def label_for(self, key, value):
        # LED label is the fixed "LED" text.
        return None

    def derive_is_on(self, current, config):
        return config.led_min_current <= current <= config.led_max_current

    def idle_is_on(self):
        return False
