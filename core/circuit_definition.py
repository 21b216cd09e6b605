# core/circuit_definition.py
"""
Caller-owned circuit definition: the component list and the wire list.

The definition is the only mutable circuit state. Solving never mutates it;
callers decide when to recompute (see `revision`) and may copy readings back
with apply_result().
"""
import uuid
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from core.behavior.component import TERMINALS, node_id
from core.exceptions import CircuitError
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TerminalRef:
    component_id: str
    terminal_id: str

    @property
    def node_id(self) -> str:
        return node_id(self.component_id, self.terminal_id)

    @classmethod
    def parse(cls, ref: str) -> "TerminalRef":
        """Parse "R1.left" into TerminalRef("R1", "left")."""
        if not isinstance(ref, str) or "." not in ref:
            raise CircuitError(f"Invalid terminal reference '{ref}'; must be 'ComponentID.terminal'.")
        comp_id, terminal_id = ref.rsplit(".", 1)
        if terminal_id not in TERMINALS:
            raise CircuitError(f"Invalid terminal '{terminal_id}' in '{ref}'; expected one of {TERMINALS}.")
        return cls(comp_id, terminal_id)

    def __str__(self) -> str:
        return f"{self.component_id}.{self.terminal_id}"


@dataclass(frozen=True)
class Wire:
    """Zero-resistance connection between two terminals; direction carries no meaning."""
    from_ref: TerminalRef
    to_ref: TerminalRef
    id: str = field(default_factory=lambda: f"wire-{uuid.uuid4().hex[:8]}")

    def connects(self, a: TerminalRef, b: TerminalRef) -> bool:
        return {self.from_ref, self.to_ref} == {a, b}

    def touches(self, comp_id: str) -> bool:
        return comp_id in (self.from_ref.component_id, self.to_ref.component_id)


def _as_ref(ref) -> TerminalRef:
    if isinstance(ref, TerminalRef):
        return ref
    if isinstance(ref, tuple):
        return TerminalRef(*ref)
    return TerminalRef.parse(ref)


class CircuitDefinition:
    def __init__(self, components: Optional[List] = None, wires: Optional[List[Wire]] = None):
        self.components: List = list(components or [])
        self.wires: List[Wire] = list(wires or [])
        # Bumped on every edit that can change the electrical result.
        self.revision = 0

    def _touch(self) -> None:
        self.revision += 1

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------
    def get_component(self, comp_id: str):
        comp = next((c for c in self.components if c.id == comp_id), None)
        if comp is None:
            raise CircuitError(f"Component '{comp_id}' not found.")
        return comp

    def has_component(self, comp_id: str) -> bool:
        return any(c.id == comp_id for c in self.components)

    def add_component(self, type_name, comp_id: Optional[str] = None, params: Optional[dict] = None,
                      position: Tuple[float, float] = (0, 0), rotation: float = 0):
        """
        Add a component by type name (with its defaults) or an existing Component instance.
        Returns the added component.
        """
        from components.factory import create_component
        if isinstance(type_name, str):
            comp_id = comp_id or f"{type_name.lower()}-{uuid.uuid4().hex[:8]}"
            comp = create_component(type_name, comp_id, params, position=position, rotation=rotation)
        else:
            comp = type_name
        if self.has_component(comp.id):
            raise CircuitError(f"Component '{comp.id}' already exists.")
        self.components.append(comp)
        self._touch()
        return comp

    def remove_component(self, comp_id: str) -> None:
        """Remove a component and every wire attached to it."""
        comp = self.get_component(comp_id)
        self.components.remove(comp)
        self.wires = [w for w in self.wires if not w.touches(comp_id)]
        self._touch()

    def update_component_property(self, comp_id: str, key: str, value: Any) -> None:
        self.get_component(comp_id).set_param(key, value)
        self._touch()

    def move_component(self, comp_id: str, position: Tuple[float, float], rotation: Optional[float] = None) -> None:
        """Position-only edit; does not change the revision."""
        comp = self.get_component(comp_id)
        comp.position = tuple(position)
        if rotation is not None:
            comp.rotation = rotation

    # ------------------------------------------------------------------
    # Wires
    # ------------------------------------------------------------------
    def find_wire(self, a, b) -> Optional[Wire]:
        a, b = _as_ref(a), _as_ref(b)
        return next((w for w in self.wires if w.connects(a, b)), None)

    def add_wire(self, from_ref, to_ref, wire_id: Optional[str] = None) -> Wire:
        """
        Connect two terminals. An existing wire between the same terminals
        (in either direction) is returned instead of adding a duplicate.
        Raises CircuitError when wire_id is already used by another wire.
        """
        a, b = _as_ref(from_ref), _as_ref(to_ref)
        existing = self.find_wire(a, b)
        if existing is not None:
            logger.debug("Wire %s already connects %s and %s", existing.id, a, b)
            return existing
        if wire_id and any(w.id == wire_id for w in self.wires):
            raise CircuitError(f"Wire '{wire_id}' already exists.")
        wire = Wire(a, b, wire_id) if wire_id else Wire(a, b)
        self.wires.append(wire)
        self._touch()
        return wire

    def connect(self, comp_a: str, terminal_a: str, comp_b: str, terminal_b: str) -> Wire:
        return self.add_wire(TerminalRef(comp_a, terminal_a), TerminalRef(comp_b, terminal_b))

    def remove_wire(self, wire_id: str) -> None:
        remaining = [w for w in self.wires if w.id != wire_id]
        if len(remaining) == len(self.wires):
            return
        self.wires = remaining
        self._touch()

    def is_terminal_connected(self, comp_id: str, terminal_id: str) -> bool:
        ref = TerminalRef(comp_id, terminal_id)
        return any(ref in (w.from_ref, w.to_ref) for w in self.wires)

    # ------------------------------------------------------------------
    # Whole definition
    # ------------------------------------------------------------------
    def clear(self) -> None:
        self.components = []
        self.wires = []
        self._touch()

    def clone(self) -> "CircuitDefinition":
        new_def = CircuitDefinition([c.clone() for c in self.components], list(self.wires))
        new_def.revision = self.revision
        return new_def

    def apply_result(self, result) -> None:
        """
        Copy solver readings into the component params and refresh meter labels.
        """
        from utils.formatting import format_current, format_voltage
        state = result.circuit_state
        for comp in self.components:
            reading = result.component_updates.get(comp.id)
            if reading is None:
                continue
            comp.params["current"] = reading.current
            comp.params["voltage_drop"] = reading.voltage_drop
            comp.params["power"] = reading.power
            if reading.is_on is not None:
                comp.params["is_on"] = reading.is_on
            if comp.meter == "current":
                comp.params["label"] = format_current(reading.current)
            elif comp.meter == "voltage":
                comp.params["label"] = format_voltage(reading.voltage_drop or state.total_voltage)

    def __repr__(self) -> str:
        return (f"<CircuitDefinition components={len(self.components)} "
                f"wires={len(self.wires)} revision={self.revision}>")
