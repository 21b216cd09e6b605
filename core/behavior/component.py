# core/behavior/component.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from utils.params import merge_params

LEFT = "left"
RIGHT = "right"
TERMINALS = (LEFT, RIGHT)

# Properties written by the solver, never read back as inputs.
OUTPUT_PARAMS = ("current", "voltage_drop", "power")


def node_id(comp_id: str, terminal_id: str) -> str:
    """Graph node identifier of a component terminal."""
    return f"{comp_id}:{terminal_id}"


class Component(ABC):
    """
    Abstract base class for two-terminal circuit components.
    Subclasses override `type_name`, `default_params` and resistance().
    """
    type_name: str = "undefined"  # Override in subclasses
    default_params: Dict[str, Any] = {}

    # Resistor, bulb and LED count as loads for short-circuit detection.
    is_resistive_load: bool = False
    is_source: bool = False
    # "current" for an ammeter, "voltage" for a voltmeter.
    meter: Optional[str] = None
    # Properties this variant derives from the solved current (lamp state).
    derived_params: Tuple[str, ...] = ()

    def __init__(self, comp_id: str, params: Dict[str, Any] = None,
                 position: Tuple[float, float] = (0, 0), rotation: float = 0) -> None:
        """
        Initialize the component.

        Args:
            comp_id: Unique identifier for the component.
            params: Property overrides merged on top of default_params.
            position: Canvas position, ignored by the solver.
            rotation: Canvas rotation in degrees, ignored by the solver.
        """
        self.id = comp_id
        self.params = merge_params(self.default_params, params or {})
        self.position = tuple(position)
        self.rotation = rotation

    @property
    def terminals(self) -> Tuple[str, str]:
        return TERMINALS

    def node_id(self, terminal_id: str) -> str:
        return node_id(self.id, terminal_id)

    @abstractmethod
    def resistance(self) -> float:
        """
        Effective resistance in ohms; math.inf for a non-conducting body.
        """
        pass

    @property
    def conducts(self) -> bool:
        """False when the body must be left out of the graph entirely (open switch)."""
        return True

    def derive_is_on(self, current: float, config) -> Optional[bool]:
        """
        On/off display state for the given resolved current.
        None means the variant has no such state.
        """
        return None

    def idle_is_on(self) -> Optional[bool]:
        """On/off state shown while no current flows (open or shorted circuit)."""
        return None

    def label_for(self, key: str, value: Any) -> Optional[str]:
        """Label to show after `key` changed to `value`, or None to keep the current one."""
        return None

    def set_param(self, key: str, value: Any) -> None:
        self.params[key] = value
        label = self.label_for(key, value)
        if label is not None:
            self.params["label"] = label

    def input_params(self) -> Dict[str, Any]:
        return {k: v for k, v in self.params.items() if k not in OUTPUT_PARAMS and k not in self.derived_params}

    def to_yaml_dict(self) -> dict:
        """
        Serialize the component for YAML output.

        Returns:
            A dictionary with keys 'id', 'type', 'params', 'position' and 'rotation'.
        """
        return {
            "id": self.id,
            "type": self.type_name,
            "params": self.input_params(),
            "position": list(self.position),
            "rotation": self.rotation,
        }

    def clone(self) -> "Component":
        """Create a copy with its own property dictionary."""
        return self.__class__(self.id, dict(self.params), position=self.position, rotation=self.rotation)

    def __repr__(self) -> str:
        return f"<Component {self.id} ({self.type_name}): params={self.params}>"


def display_number(value: Any) -> str:
    """Render a property value for a label: 100.0 -> '100', '4.7 kohm' unchanged."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value:g}"
    return str(value)
