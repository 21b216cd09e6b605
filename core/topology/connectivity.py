# core/topology/connectivity.py
"""
Breadth-first reachability over the terminal graph.
"""
from typing import Iterable, Set

import networkx as nx


def reachable_full(graph, start: str) -> Set[str]:
    """
    Nodes reachable from start through component bodies and wires.

    Args:
        graph: A CircuitGraph (or a view of one).
        start: Terminal node id.

    Returns:
        The visited set, including start; empty when start is not in the graph.
    """
    if not graph.has_node(start):
        return set()
    return set(nx.node_connected_component(graph.nx_graph, start))


def reachable_wire_only(wires: Iterable, start: str) -> Set[str]:
    """
    Nodes reachable from start through direct wire connections only,
    i.e. the terminals that form one electrical node with start.
    """
    g = nx.Graph()
    g.add_node(start)
    for wire in wires:
        g.add_edge(wire.from_ref.node_id, wire.to_ref.node_id)
    return set(nx.node_connected_component(g, start))
