from components.resistive_component import ResistiveComponent


class ResistorComponent(ResistiveComponent):
    type_name = "resistor"
    default_params = {"resistance": 100.0, "label": "100Ω"}
