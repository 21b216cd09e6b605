# core/topology/detector.py
"""
Topology detection: locate the source, decide whether its terminals are
joined through the rest of the circuit, look for zero-resistance return
paths and split the return paths into branches.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from core.analysis.branches import Branch, analyze_branches
from core.behavior.component import LEFT, RIGHT
from core.config import SolverConfig
from core.resistance import effective_resistance
from core.topology.connectivity import reachable_full
from core.topology.paths import find_all_paths, path_resistance
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Topology:
    is_complete: bool = False
    has_short_circuit: bool = False
    is_open: bool = True
    branches: List[Branch] = field(default_factory=list)
    battery_voltage: float = 0.0
    source_id: Optional[str] = None
    paths: List[List[str]] = field(default_factory=list)


def find_source(components):
    """First battery in the component list, or None."""
    return next((c for c in components if c.is_source), None)


def has_resistive_load(components) -> bool:
    return any(c.is_resistive_load and effective_resistance(c) > 0 for c in components)


def detect_topology(components, graph, config: Optional[SolverConfig] = None) -> Topology:
    """
    Classify the circuit as open, shorted or complete.

    The source's own body is left out of the traversal graph: only paths
    leaving source+ through the rest of the circuit and returning to source-
    count as closing the loop.

    Args:
        components: Component list the graph was built from.
        graph: CircuitGraph from build_graph().
        config: Solver settings (path enumeration bound).

    Returns:
        A Topology. has_short_circuit implies is_complete.
    """
    config = config or SolverConfig()
    battery = find_source(components)
    if battery is None:
        logger.debug("No voltage source in circuit.")
        return Topology()

    voltage = battery.voltage
    positive = battery.node_id(RIGHT)
    negative = battery.node_id(LEFT)
    external = graph.without_component(battery.id)

    if negative not in reachable_full(external, positive):
        logger.debug("Source %s terminals not connected; circuit open.", battery.id)
        return Topology(battery_voltage=voltage, source_id=battery.id)

    paths = find_all_paths(external, positive, negative, max_paths=config.max_paths)
    shorted = any(path_resistance(external, p) == 0 for p in paths)
    if not has_resistive_load(components):
        shorted = True

    branches = analyze_branches(external, paths, components)
    logger.debug("Source %s: %d path(s), short=%s", battery.id, len(paths), shorted)
    return Topology(
        is_complete=True,
        has_short_circuit=shorted,
        is_open=False,
        branches=branches,
        battery_voltage=voltage,
        source_id=battery.id,
        paths=paths,
    )
