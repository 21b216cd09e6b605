import math
import pytest
from conftest import chain, parallel
from core.circuit_definition import CircuitDefinition
from core.config import SolverConfig
from core.solver import calculate_circuit, solve


def test_series_ohms_law(series_circuit):
    result = solve(series_circuit)
    state = result.circuit_state
    assert state.is_complete and not state.is_open
    assert not state.has_short_circuit
    assert state.total_voltage == 9.0
    assert state.total_resistance == pytest.approx(100.0)
    assert state.total_current == pytest.approx(0.09)
    assert state.total_power == pytest.approx(0.81)
    r1 = result.component_updates["R1"]
    assert r1.current == pytest.approx(0.09)
    assert r1.voltage_drop == pytest.approx(9.0)
    assert r1.power == pytest.approx(0.81)
    assert result.branches == [["R1"]]

def test_equal_parallel_resistors(parallel_circuit):
    result = solve(parallel_circuit)
    state = result.circuit_state
    assert state.total_resistance == pytest.approx(50.0)
    assert state.total_current == pytest.approx(0.18)
    for comp_id in ("R1", "R2"):
        reading = result.component_updates[comp_id]
        assert reading.current == pytest.approx(0.09)
        assert reading.voltage_drop == pytest.approx(9.0)

def test_parallel_currents_sum_to_total():
    definition = CircuitDefinition()
    definition.add_component("battery", "B1", {"voltage": 12})
    definition.add_component("resistor", "R1", {"resistance": 100})
    definition.add_component("resistor", "R2", {"resistance": 300})
    parallel(definition, "B1", "R1", "R2")
    result = solve(definition)
    total = result.circuit_state.total_current
    assert total == pytest.approx(0.16)
    parts = result.component_updates["R1"].current + result.component_updates["R2"].current
    assert parts == pytest.approx(total)

def test_self_wired_battery_is_short():
    definition = CircuitDefinition()
    definition.add_component("battery", "B1")
    definition.connect("B1", "right", "B1", "left")
    state = solve(definition).circuit_state
    assert state.has_short_circuit and state.is_complete
    assert state.total_resistance == 0.0
    assert math.isinf(state.total_current)
    assert state.total_power == 0.0

def test_short_circuit_readings_are_idle(series_circuit):
    series_circuit.connect("B1", "right", "B1", "left")
    result = solve(series_circuit)
    assert result.circuit_state.has_short_circuit
    assert result.component_updates["R1"].current == 0.0

def test_open_switch(switched_circuit):
    closed = solve(switched_circuit)
    assert closed.circuit_state.is_complete
    assert closed.component_updates["S1"].is_on is True
    switched_circuit.update_component_property("S1", "is_on", False)
    result = solve(switched_circuit)
    state = result.circuit_state
    assert not state.is_complete
    assert not state.has_short_circuit
    assert state.total_current == 0.0
    assert math.isinf(state.total_resistance)
    assert result.component_updates["R1"].current == 0.0
    assert result.component_updates["S1"].is_on is False

def test_empty_circuit():
    result = solve(CircuitDefinition())
    assert result.component_updates == {}
    assert result.circuit_state.is_open
    assert math.isinf(result.circuit_state.total_resistance)

def test_lone_battery_is_open():
    definition = CircuitDefinition()
    definition.add_component("battery", "B1")
    result = solve(definition)
    assert not result.circuit_state.is_complete
    assert result.circuit_state.total_voltage == 9.0
    assert set(result.component_updates) == {"B1"}

@pytest.mark.parametrize("resistance, lit", [(6000, False), (900, True), (100, False)])
def test_led_brightness_band(resistance, lit):
    definition = CircuitDefinition()
    definition.add_component("battery", "B1")
    definition.add_component("led", "D1", {"resistance": resistance})
    chain(definition, "B1", "D1")
    assert solve(definition).component_updates["D1"].is_on is lit

@pytest.mark.parametrize("resistance, lit", [(50, True), (10000, False)])
def test_bulb_threshold(resistance, lit):
    definition = CircuitDefinition()
    definition.add_component("battery", "B1")
    definition.add_component("bulb", "L1", {"resistance": resistance})
    chain(definition, "B1", "L1")
    assert solve(definition).component_updates["L1"].is_on is lit

def test_custom_led_band():
    definition = CircuitDefinition()
    definition.add_component("battery", "B1")
    definition.add_component("led", "D1", {"resistance": 6000})
    chain(definition, "B1", "D1")
    config = SolverConfig(led_min_current=0.001)
    assert solve(definition, config).component_updates["D1"].is_on is True

def test_ammeter_in_series():
    definition = CircuitDefinition()
    definition.add_component("battery", "B1")
    definition.add_component("ammeter", "A1")
    definition.add_component("resistor", "R1")
    chain(definition, "B1", "A1", "R1")
    result = solve(definition)
    assert result.circuit_state.total_resistance == pytest.approx(100.0)
    assert result.component_updates["A1"].current == pytest.approx(0.09)
    assert result.component_updates["A1"].voltage_drop == 0.0

def test_voltmeter_across_resistor(series_circuit):
    series_circuit.add_component("voltmeter", "V1")
    parallel(series_circuit, "B1", "V1")
    result = solve(series_circuit)
    assert result.circuit_state.total_resistance == pytest.approx(100.0)
    assert result.component_updates["V1"].voltage_drop == 9.0
    assert result.component_updates["V1"].current == 0.0
    assert result.component_updates["R1"].current == pytest.approx(0.09)

def test_voltmeter_in_series_blocks_current():
    definition = CircuitDefinition()
    definition.add_component("battery", "B1")
    definition.add_component("resistor", "R1")
    definition.add_component("voltmeter", "V1")
    chain(definition, "B1", "R1", "V1")
    state = solve(definition).circuit_state
    assert state.is_complete and not state.has_short_circuit
    assert state.total_current == 0.0
    assert math.isinf(state.total_resistance)

def test_shared_series_component_merge():
    # R1 feeds R2 and R3 in parallel; each path is reported as its own branch.
    definition = CircuitDefinition()
    definition.add_component("battery", "B1")
    for comp_id in ("R1", "R2", "R3"):
        definition.add_component("resistor", comp_id)
    definition.connect("B1", "right", "R1", "left")
    for comp_id in ("R2", "R3"):
        definition.connect("R1", "right", comp_id, "left")
        definition.connect(comp_id, "right", "B1", "left")
    result = solve(definition)
    assert result.branches == [["R1", "R2"], ["R1", "R3"]]
    assert result.circuit_state.total_resistance == pytest.approx(100.0)
    r1 = result.component_updates["R1"]
    assert r1.current == pytest.approx(0.09)
    assert r1.voltage_drop == pytest.approx(4.5)
    assert r1.power == pytest.approx(0.405)
    assert result.component_updates["R2"].current == pytest.approx(0.045)

def test_removing_return_wire_isolates_branch(parallel_circuit):
    wire = parallel_circuit.find_wire("R2.right", "B1.left")
    parallel_circuit.remove_wire(wire.id)
    result = solve(parallel_circuit)
    assert result.component_updates["R1"].current == pytest.approx(0.09)
    assert result.component_updates["R2"].current == 0.0

def test_dangling_wire_is_ignored(series_circuit):
    series_circuit.add_wire("R1.left", "ghost.right")
    assert solve(series_circuit).circuit_state.total_current == pytest.approx(0.09)

def test_solve_is_idempotent_and_pure(parallel_circuit):
    revision = parallel_circuit.revision
    first = solve(parallel_circuit)
    second = solve(parallel_circuit)
    assert first == second
    assert parallel_circuit.revision == revision
    assert "current" not in parallel_circuit.get_component("R1").params

def test_calculate_circuit_with_lists(series_circuit):
    result = calculate_circuit(series_circuit.components, series_circuit.wires)
    assert result.circuit_state.total_current == pytest.approx(0.09)

def test_long_series_chain():
    definition = CircuitDefinition()
    definition.add_component("battery", "B1")
    ids = [f"R{i}" for i in range(600)]
    for comp_id in ids:
        definition.add_component("resistor", comp_id, {"resistance": 1})
    chain(definition, "B1", *ids)
    result = solve(definition)
    assert result.circuit_state.total_resistance == pytest.approx(600)
    assert result.circuit_state.total_current == pytest.approx(0.015)
    assert result.component_updates["R599"].voltage_drop == pytest.approx(0.015)

def test_removing_one_wire_keeps_other_branch():
    definition = CircuitDefinition()
    definition.add_component("battery", "B1")
    definition.add_component("resistor", "R1")
    definition.add_component("resistor", "R2")
    definition.add_wire("B1.right", "R1.left", "w1")
    definition.add_wire("R1.right", "B1.left", "w2")
    definition.add_wire("B1.right", "R2.left", "w3")
    definition.add_wire("R2.right", "B1.left", "w4")
    definition.remove_wire("w3")
    assert len(definition.wires) == 3
    result = solve(definition)
    assert result.component_updates["R1"].current == pytest.approx(0.09)
    assert result.component_updates["R2"].current == 0.0
