# core/analysis/component_solver.py
"""
Per-component readings from the total current and the branch structure.
"""
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from core.config import SolverConfig
from core.resistance import effective_resistance


@dataclass
class ComponentReading:
    current: float = 0.0
    voltage_drop: float = 0.0
    power: float = 0.0
    is_on: Optional[bool] = None


def idle_readings(components) -> Dict[str, ComponentReading]:
    """Zero readings for every component, lamps off."""
    return {c.id: ComponentReading(is_on=c.idle_is_on()) for c in components}


def ohmic_reading(component, current: float) -> ComponentReading:
    """V = I * R and P = I^2 * R for one component carrying current."""
    resistance = effective_resistance(component)
    return ComponentReading(current, current * resistance, current * current * resistance)


def solve_components(components: List, branches: List, voltage: float, total_current: float,
                     config: Optional[SolverConfig] = None) -> Dict[str, ComponentReading]:
    """
    Back-propagate the total current into per-component readings.

    A single branch carries total_current through every component on it.
    With several branches each finite, non-zero branch carries V / R_branch;
    a component found on more than one branch sums its currents and powers and
    keeps the largest voltage drop. Meters are overwritten last: the ammeter
    reads total_current, the voltmeter reads the source voltage.
    """
    config = config or SolverConfig()
    readings = idle_readings(components)
    by_id = {c.id: c for c in components}

    merged: Dict[str, ComponentReading] = {}
    if len(branches) == 1:
        for comp in branches[0].components:
            merged[comp.id] = ohmic_reading(comp, total_current)
    else:
        for branch in branches:
            if branch.resistance == 0 or math.isinf(branch.resistance):
                continue
            branch_current = voltage / branch.resistance
            for comp in branch.components:
                reading = ohmic_reading(comp, branch_current)
                existing = merged.get(comp.id)
                if existing is None:
                    merged[comp.id] = reading
                else:
                    existing.current += reading.current
                    existing.voltage_drop = max(existing.voltage_drop, reading.voltage_drop)
                    existing.power += reading.power

    for comp_id, reading in merged.items():
        reading.is_on = by_id[comp_id].derive_is_on(reading.current, config)
        readings[comp_id] = reading

    for comp in components:
        if comp.meter == "current":
            readings[comp.id] = ComponentReading(current=total_current)
        elif comp.meter == "voltage":
            readings[comp.id] = ComponentReading(voltage_drop=voltage)
    return readings
