# core/circuit_serializer.py
import yaml


def _plain(value):
    # yaml.safe_dump writes math.inf as .inf, which parse_quantity reads back.
    if isinstance(value, tuple):
        return list(value)
    return value


def to_yaml_dict(definition) -> dict:
    """
    Convert a circuit definition to a dictionary suitable for YAML serialization.

    Args:
        definition: The CircuitDefinition.

    Returns:
        A dictionary with 'components' and 'wires' in the circuit file format.
        Solver outputs (current, voltage drop, power) are left out.
    """
    components = []
    for comp in definition.components:
        entry = comp.to_yaml_dict()
        entry["params"] = {k: _plain(v) for k, v in entry["params"].items()}
        components.append(entry)
    return {
        "components": components,
        "wires": [
            {"id": w.id, "from": str(w.from_ref), "to": str(w.to_ref)}
            for w in definition.wires
        ],
    }


def to_yaml_file(definition, path: str) -> None:
    """
    Write the definition's YAML representation to a file.
    """
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(to_yaml_dict(definition), f, sort_keys=False, allow_unicode=True)
