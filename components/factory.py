# components/factory.py
from typing import Any, Dict, Type

from core.behavior.component import Component
from core.exceptions import CircuitError
from components.ammeter import AmmeterComponent
from components.battery import BatteryComponent
from components.bulb import BulbComponent
from components.ground import GroundComponent
from components.led import LEDComponent
from components.resistor import ResistorComponent
from components.switch import SwitchComponent
from components.voltmeter import VoltmeterComponent
from components.wire import WireComponent

# Use the type_name attributes from each class.
_component_registry: Dict[str, Type[Component]] = {
    BatteryComponent.type_name: BatteryComponent,
    ResistorComponent.type_name: ResistorComponent,
    BulbComponent.type_name: BulbComponent,
    LEDComponent.type_name: LEDComponent,
    SwitchComponent.type_name: SwitchComponent,
    WireComponent.type_name: WireComponent,
    AmmeterComponent.type_name: AmmeterComponent,
    VoltmeterComponent.type_name: VoltmeterComponent,
    GroundComponent.type_name: GroundComponent,
}

def get_component_class(type_name: str) -> Type[Component]:
    if not isinstance(type_name, str):
        raise CircuitError("Component type name must be a string.")
    comp_class = _component_registry.get(type_name.lower())
    if comp_class is None:
        raise CircuitError(f"Unknown component type: {type_name}")
    return comp_class

def register_component(type_name: str, comp_class: Type[Component]) -> None:
    if not isinstance(type_name, str):
        raise CircuitError("Component type name must be a string.")
    if not isinstance(comp_class, type) or not issubclass(comp_class, Component):
        raise CircuitError("Registered component must be a subclass of Component.")
    _component_registry[type_name.lower()] = comp_class

def create_component(type_name: str, comp_id: str, params: Dict[str, Any] = None, **kwargs) -> Component:
    """Instantiate a registered component; kwargs go to the constructor (position, rotation)."""
    return get_component_class(type_name)(comp_id, params, **kwargs)

def registered_types() -> list:
    return sorted(_component_registry)
