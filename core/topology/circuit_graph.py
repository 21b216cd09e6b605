# core/topology/circuit_graph.py
"""
CircuitGraph: terminal-level connectivity of a DC circuit.

One node per component terminal ("<componentId>:<terminalId>"). Two kinds of
adjacency share that node set:
  - internal edges through a component body, carrying its resistance;
  - wire edges, zero-cost merges of two terminal nodes.
Backed by a networkx MultiGraph so a wire and a component body may join the
same pair of nodes. Adjacency keeps insertion order, which keeps path
enumeration deterministic.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import networkx as nx

from core.behavior.component import node_id
from core.resistance import effective_resistance
from utils.logging_config import get_logger

logger = get_logger(__name__)

INTERNAL = "internal"
WIRE = "wire"


@dataclass(frozen=True)
class GraphEdge:
    """
    Internal edge of one component, found from either of its terminal nodes.
    """
    component_id: str
    resistance: float
    type_name: str


class CircuitGraph:
    def __init__(self, graph: Optional[nx.MultiGraph] = None):
        self._graph = graph if graph is not None else nx.MultiGraph()

    @property
    def nx_graph(self) -> nx.MultiGraph:
        return self._graph

    def add_terminal(self, comp_id: str, terminal_id: str) -> str:
        nid = node_id(comp_id, terminal_id)
        self._graph.add_node(nid, component_id=comp_id, terminal_id=terminal_id)
        return nid

    def add_component_edge(self, comp_id: str, node_a: str, node_b: str,
                           resistance: float, type_name: str) -> None:
        self._graph.add_edge(node_a, node_b, key=f"body:{comp_id}", kind=INTERNAL,
                             component_id=comp_id, resistance=resistance, type_name=type_name)

    def add_wire(self, node_a: str, node_b: str, wire_id: Optional[str] = None) -> None:
        key = f"wire:{wire_id}" if wire_id is not None else None
        self._graph.add_edge(node_a, node_b, key=key, kind=WIRE)

    def has_node(self, nid: str) -> bool:
        return self._graph.has_node(nid)

    def nodes(self) -> List[str]:
        return list(self._graph.nodes)

    def neighbors(self, nid: str) -> Iterator[str]:
        """
        Distinct neighbors of nid over every adjacency kind in this view.
        Unknown nodes have no neighbors.
        """
        if not self._graph.has_node(nid):
            return iter(())
        return iter(self._graph.adj[nid])

    def edge_between(self, node_a: str, node_b: str) -> Optional[GraphEdge]:
        """
        Component edge crossed when stepping from node_a to node_b, in either direction.

        Returns None when the nodes are not adjacent or when a wire joins them
        (a wire in parallel with a body is the zero-resistance route).
        """
        data = self._graph.get_edge_data(node_a, node_b)
        if not data:
            return None
        internal = None
        for attrs in data.values():
            if attrs.get("kind") == WIRE:
                return None
            if internal is None:
                internal = attrs
        if internal is None:
            return None
        return GraphEdge(internal["component_id"], internal["resistance"], internal["type_name"])

    def component_edges(self) -> Iterator[GraphEdge]:
        for _, _, attrs in self._graph.edges(data=True):
            if attrs.get("kind") == INTERNAL:
                yield GraphEdge(attrs["component_id"], attrs["resistance"], attrs["type_name"])

    def wire_only(self) -> "CircuitGraph":
        """Read-only view keeping only wire adjacency."""
        g = self._graph
        return CircuitGraph(nx.subgraph_view(
            g, filter_edge=lambda u, v, k: g[u][v][k].get("kind") == WIRE))

    def without_component(self, comp_id: str) -> "CircuitGraph":
        """Read-only view with the body of comp_id removed; its terminals stay."""
        g = self._graph
        return CircuitGraph(nx.subgraph_view(
            g, filter_edge=lambda u, v, k: g[u][v][k].get("component_id") != comp_id))

    def __contains__(self, nid: str) -> bool:
        return self.has_node(nid)

    def __repr__(self) -> str:
        return (f"<CircuitGraph nodes={self._graph.number_of_nodes()} "
                f"edges={self._graph.number_of_edges()}>")


def build_graph(components: Iterable, wires: Iterable) -> CircuitGraph:
    """
    Build the terminal graph for a component list and a wire list.

    Open switches get their terminals but no body edge. Wires whose endpoints
    do not resolve to existing terminals are skipped.
    """
    graph = CircuitGraph()
    for comp in components:
        left, right = (graph.add_terminal(comp.id, t) for t in comp.terminals)
        if comp.conducts:
            graph.add_component_edge(comp.id, left, right, effective_resistance(comp), comp.type_name)

    for wire in wires:
        a, b = wire.from_ref.node_id, wire.to_ref.node_id
        if not (graph.has_node(a) and graph.has_node(b)):
            logger.debug("Skipping wire %s: dangling endpoint %s -> %s", wire.id, a, b)
            continue
        if a == b:
            logger.debug("Skipping wire %s: both ends on %s", wire.id, a)
            continue
        graph.add_wire(a, b, wire.id)
    return graph
