# evaluation/sweep.py
import itertools
import logging
import time
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from core.exceptions import CircuitError
from core.solver import solve


def sweep_values(entry: Dict[str, Any]) -> List[Any]:
    """Explicit `values`, or `points` samples over `range` on a linear or log scale."""
    if "values" in entry:
        return list(entry["values"])
    start, end = map(float, entry["range"])
    points = entry.get("points", 2)
    if entry.get("scale", "linear") == "log":
        samples = np.logspace(np.log10(start), np.log10(end), points)
    else:
        samples = np.linspace(start, end, points)
    return [float(v) for v in samples]


def _evaluate_point(definition, assignments: Tuple[Tuple[str, str, Any], ...], solver_config):
    point = definition.clone()
    for comp_id, param, value in assignments:
        point.update_component_property(comp_id, param, value)
    return solve(point, solver_config)


class SweepResult:
    def __init__(self, results, errors, stats=None):
        self.results = results
        self.errors = errors
        self.stats = stats or {}

    def to_dataframe(self):
        import pandas as pd
        rows = []
        for key, result in self.results.items():
            row = dict(key)
            if result is not None:
                state = result.circuit_state
                row.update({
                    "total_voltage": state.total_voltage,
                    "total_current": state.total_current,
                    "total_resistance": state.total_resistance,
                    "total_power": state.total_power,
                    "is_complete": state.is_complete,
                    "has_short_circuit": state.has_short_circuit,
                })
            else:
                row.update({"total_voltage": None, "total_current": None, "total_resistance": None,
                            "total_power": None, "is_complete": None, "has_short_circuit": None})
            rows.append(row)
        return pd.DataFrame(rows)


def sweep(definition, config: Dict[str, Any], solver_config=None) -> SweepResult:
    """
    Solve the circuit at every combination of the swept property values.

    Each point is solved on a clone, so `definition` is left untouched.
    Results are keyed by (("<component>.<param>", value), ...).
    """
    sweep_list = config.get("sweep", [])
    targets = [(s["component"], s["param"]) for s in sweep_list]
    axes = [sweep_values(s) for s in sweep_list]

    results: Dict[Tuple, Optional[Any]] = {}
    errors: List[str] = []
    start_time = time.time()
    combos = list(itertools.product(*axes)) if axes else [()]
    for values in combos:
        assignments = tuple((comp_id, param, value) for (comp_id, param), value in zip(targets, values))
        key = tuple((f"{comp_id}.{param}", value) for comp_id, param, value in assignments)
        try:
            results[key] = _evaluate_point(definition, assignments, solver_config)
        except CircuitError as e:
            logging.error("Sweep point %s failed: %s", dict(key), e)
            errors.append(f"Point {dict(key)}: {e}")
            results[key] = None

    elapsed = time.time() - start_time
    stats = {"points": len(combos), "elapsed": elapsed}
    return SweepResult(results, errors, stats)
