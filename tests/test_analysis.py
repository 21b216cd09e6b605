import math
import pytest
from core.analysis.branches import Branch
from core.analysis.component_solver import solve_components, idle_readings
from core.analysis.equivalent_resistance import equivalent_resistance
from components.ammeter import AmmeterComponent
from components.bulb import BulbComponent
from components.resistor import ResistorComponent
from components.voltmeter import VoltmeterComponent


def branches_of(*resistances):
    return [Branch(id=f"branch-{i}", resistance=r, is_parallel=len(resistances) > 1)
            for i, r in enumerate(resistances)]


@pytest.mark.parametrize("resistances, expected", [
    ((), 0.0),
    ((100.0,), 100.0),
    ((100.0, 100.0), 50.0),
    ((100.0, 300.0), 75.0),
    ((100.0, 0.0), 0.0),
    ((100.0, math.inf), 100.0),
])
def test_equivalent_resistance(resistances, expected):
    assert equivalent_resistance(branches_of(*resistances)) == pytest.approx(expected)

def test_equivalent_resistance_all_infinite():
    assert math.isinf(equivalent_resistance(branches_of(math.inf, math.inf)))
    assert math.isinf(equivalent_resistance(branches_of(math.inf)))

def test_single_branch_carries_total_current():
    r1 = ResistorComponent("R1", {"resistance": 100})
    r2 = ResistorComponent("R2", {"resistance": 50})
    branch = Branch("branch-0", [r1, r2], 150.0)
    readings = solve_components([r1, r2], [branch], 9.0, 0.06)
    assert readings["R1"].current == pytest.approx(0.06)
    assert readings["R1"].voltage_drop == pytest.approx(6.0)
    assert readings["R2"].voltage_drop == pytest.approx(3.0)
    assert readings["R2"].power == pytest.approx(0.18)

def test_shared_component_merges_readings():
    r1 = ResistorComponent("R1", {"resistance": 100})
    r2 = ResistorComponent("R2", {"resistance": 100})
    r3 = ResistorComponent("R3", {"resistance": 100})
    branches = [Branch("branch-0", [r1, r2], 200.0, True), Branch("branch-1", [r1, r3], 200.0, True)]
    readings = solve_components([r1, r2, r3], branches, 9.0, 0.09)
    # Currents and powers add up; the larger drop wins.
    assert readings["R1"].current == pytest.approx(0.09)
    assert readings["R1"].voltage_drop == pytest.approx(4.5)
    assert readings["R1"].power == pytest.approx(0.405)
    assert readings["R2"].current == pytest.approx(0.045)

def test_infinite_branch_is_skipped():
    r1 = ResistorComponent("R1", {"resistance": 100})
    v1 = VoltmeterComponent("V1")
    branches = [Branch("branch-0", [r1], 100.0, True), Branch("branch-1", [v1], math.inf, True)]
    readings = solve_components([r1, v1], branches, 9.0, 0.09)
    assert readings["R1"].current == pytest.approx(0.09)
    assert readings["V1"].current == 0.0
    assert readings["V1"].voltage_drop == 9.0

def test_meters_read_totals():
    a1 = AmmeterComponent("A1")
    r1 = ResistorComponent("R1", {"resistance": 100})
    branch = Branch("branch-0", [a1, r1], 100.0)
    readings = solve_components([a1, r1], [branch], 9.0, 0.09)
    assert readings["A1"].current == pytest.approx(0.09)
    assert readings["A1"].voltage_drop == 0.0

def test_components_off_path_stay_idle():
    r1 = ResistorComponent("R1", {"resistance": 100})
    bulb = BulbComponent("L1")
    readings = solve_components([r1, bulb], [Branch("branch-0", [r1], 100.0)], 9.0, 0.09)
    assert readings["L1"].current == 0.0
    assert readings["L1"].is_on is False
    assert readings["R1"].is_on is None

def test_idle_readings():
    readings = idle_readings([BulbComponent("L1"), ResistorComponent("R1")])
    assert readings["L1"].is_on is False
    assert readings["R1"].current == 0.0 and readings["R1"].is_on is None
