# core/solver.py
"""
DC circuit solver entry point.

solve() takes a CircuitDefinition snapshot and returns a fresh SolveResult:
graph -> topology -> branches -> equivalent resistance -> component readings.
Nothing in the solve path raises; every degenerate circuit maps to a defined
state.
"""
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from core.analysis.component_solver import ComponentReading, idle_readings, solve_components
from core.analysis.equivalent_resistance import equivalent_resistance
from core.config import SolverConfig
from core.topology.circuit_graph import build_graph
from core.topology.detector import detect_topology
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class CircuitState:
    total_voltage: float = 0.0
    total_current: float = 0.0
    total_resistance: float = math.inf
    total_power: float = 0.0
    is_complete: bool = False
    has_short_circuit: bool = False

    @property
    def is_open(self) -> bool:
        return not self.is_complete


@dataclass
class SolveResult:
    circuit_state: CircuitState
    component_updates: Dict[str, ComponentReading]
    # Component ids per branch, for display.
    branches: List[List[str]] = field(default_factory=list)


def calculate_circuit(components: List, wires: List, config: Optional[SolverConfig] = None) -> SolveResult:
    """
    Solve a circuit given as a component list and a wire list.

    Args:
        components: Component instances (one reading is returned per entry).
        wires: Wire instances; dangling references are ignored.
        config: Solver settings; defaults when omitted.

    Returns:
        SolveResult with the circuit totals and per-component readings.
    """
    config = config or SolverConfig()
    graph = build_graph(components, wires)
    topology = detect_topology(components, graph, config)
    voltage = topology.battery_voltage
    branch_ids = [b.component_ids for b in topology.branches]

    if not topology.is_complete or topology.has_short_circuit:
        shorted = topology.has_short_circuit
        state = CircuitState(
            total_voltage=voltage,
            total_current=math.inf if shorted else 0.0,
            total_resistance=0.0 if shorted else math.inf,
            total_power=0.0,
            is_complete=topology.is_complete,
            has_short_circuit=shorted,
        )
        logger.debug("Circuit %s", "shorted" if shorted else "open")
        return SolveResult(state, idle_readings(components), branch_ids)

    total_resistance = equivalent_resistance(topology.branches)
    if total_resistance == 0 or math.isinf(total_resistance):
        shorted = total_resistance == 0
        state = CircuitState(
            total_voltage=voltage,
            total_current=math.inf if shorted else 0.0,
            total_resistance=total_resistance,
            total_power=0.0,
            is_complete=True,
            has_short_circuit=shorted,
        )
        logger.debug("Degenerate equivalent resistance %s", total_resistance)
        return SolveResult(state, idle_readings(components), branch_ids)

    # Ohm's law, then P = V * I
    total_current = voltage / total_resistance
    total_power = voltage * total_current
    readings = solve_components(components, topology.branches, voltage, total_current, config)

    state = CircuitState(
        total_voltage=voltage,
        total_current=total_current,
        total_resistance=total_resistance,
        total_power=total_power,
        is_complete=True,
        has_short_circuit=False,
    )
    logger.debug("Solved: V=%s R_eq=%s I=%s over %d branch(es)",
                 voltage, total_resistance, total_current, len(topology.branches))
    return SolveResult(state, readings, branch_ids)


def solve(definition, config: Optional[SolverConfig] = None) -> SolveResult:
    """Solve a CircuitDefinition."""
    return calculate_circuit(definition.components, definition.wires, config)
