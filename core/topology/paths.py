from typing import List

from core.config import MAX_PATHS
from utils.logging_config import get_logger

logger = get_logger(__name__)


def find_all_paths(graph, start: str, end: str, max_paths: int = MAX_PATHS) -> List[List[str]]:
    """
    Enumerate simple paths from start to end by depth-first search.

    A node is never repeated within one path. Enumeration stops once max_paths
    paths are collected, so circuits with more distinct source-to-source paths
    have the extra ones ignored. The walk keeps an explicit stack of neighbor
    iterators, so path length is not bounded by the interpreter's recursion limit.
    """
    paths: List[List[str]] = []
    if not (graph.has_node(start) and graph.has_node(end)):
        return paths
    if start == end:
        return [[start]]

    path = [start]
    visited = {start}
    stack = [graph.neighbors(start)]
    while stack and len(paths) < max_paths:
        neighbor = next(stack[-1], None)
        if neighbor is None:
            stack.pop()
            visited.discard(path.pop())
            continue
        if neighbor in visited:
            continue
        if neighbor == end:
            paths.append(path + [end])
            continue
        path.append(neighbor)
        visited.add(neighbor)
        stack.append(graph.neighbors(neighbor))

    if len(paths) >= max_paths:
        logger.debug("Path enumeration %s -> %s capped at %d paths", start, end, max_paths)
    return paths


def path_resistance(graph, path: List[str]) -> float:
    """Sum of the component resistances crossed along path."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        edge = graph.edge_between(a, b)
        if edge is not None:
            total += edge.resistance
    return total
