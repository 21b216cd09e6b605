# core/analysis/equivalent_resistance.py
import math
from typing import List


def equivalent_resistance(branches: List) -> float:
    """
    Combine branch resistances into the resistance seen by the source.

    One branch is a series chain and keeps its own resistance. Several branches
    combine as 1 / sum(1 / R_i): any zero branch shorts the whole set, infinite
    branches drop out, and all-infinite branches stay infinite.
    """
    if not branches:
        return 0.0
    if len(branches) == 1:
        return branches[0].resistance

    if any(b.resistance == 0 for b in branches):
        return 0.0
    finite = [b.resistance for b in branches if not math.isinf(b.resistance)]
    if not finite:
        return math.inf
    return 1.0 / sum(1.0 / r for r in finite)
