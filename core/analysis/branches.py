from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Branch:
    """
    One source-to-source path, reduced to the components it crosses.

    Attributes:
        id: "branch-<index>" in enumeration order.
        components: Distinct components along the path, in traversal order.
        resistance: Sum of their effective resistances.
        is_parallel: True when the circuit has more than one branch.
    """
    id: str
    components: List[object] = field(default_factory=list)
    resistance: float = 0.0
    is_parallel: bool = False

    @property
    def component_ids(self) -> List[str]:
        return [c.id for c in self.components]


def analyze_branches(graph, paths: List[List[str]], components: List[object]) -> List[Branch]:
    by_id: Dict[str, object] = {c.id: c for c in components}
    parallel = len(paths) > 1
    branches: List[Branch] = []
    for index, path in enumerate(paths):
        branch = Branch(id=f"branch-{index}", is_parallel=parallel)
        seen = set()
        for a, b in zip(path, path[1:]):
            edge = graph.edge_between(a, b)
            if edge is None or edge.component_id in seen:
                continue
            seen.add(edge.component_id)
            comp = by_id.get(edge.component_id)
            if comp is None:
                continue
            branch.components.append(comp)
            branch.resistance += edge.resistance
        branches.append(branch)
    return branches
