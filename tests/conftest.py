import pytest
from core.circuit_definition import CircuitDefinition


def chain(definition, source_id, *comp_ids):
    """
    Wire source_id.right -> first.left, first.right -> second.left, ...,
    last.right -> source_id.left, i.e. a single series loop.
    """
    previous = (source_id, "right")
    for comp_id in comp_ids:
        definition.connect(previous[0], previous[1], comp_id, "left")
        previous = (comp_id, "right")
    definition.connect(previous[0], previous[1], source_id, "left")
    return definition


def parallel(definition, source_id, *comp_ids):
    """Wire every component directly across the source terminals."""
    for comp_id in comp_ids:
        definition.connect(source_id, "right", comp_id, "left")
        definition.connect(comp_id, "right", source_id, "left")
    return definition


@pytest.fixture
def series_circuit():
    # 9 V battery driving a single 100 ohm resistor.
    definition = CircuitDefinition()
    definition.add_component("battery", "B1", {"voltage": 9})
    definition.add_component("resistor", "R1", {"resistance": 100})
    return chain(definition, "B1", "R1")


@pytest.fixture
def parallel_circuit():
    # Two 100 ohm resistors across a 9 V battery.
    definition = CircuitDefinition()
    definition.add_component("battery", "B1", {"voltage": 9})
    definition.add_component("resistor", "R1", {"resistance": 100})
    definition.add_component("resistor", "R2", {"resistance": 100})
    return parallel(definition, "B1", "R1", "R2")


@pytest.fixture
def switched_circuit():
    definition = CircuitDefinition()
    definition.add_component("battery", "B1", {"voltage": 9})
    definition.add_component("switch", "S1")
    definition.add_component("resistor", "R1", {"resistance": 100})
    return chain(definition, "B1", "S1", "R1")


@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog
