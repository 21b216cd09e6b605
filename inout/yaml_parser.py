# inout/yaml_parser.py
import math
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from cerberus import Validator

from components.factory import create_component
from core.circuit_definition import CircuitDefinition, TerminalRef
from core.config import SolverConfig
from core.exceptions import CircuitError, NetlistError, ParameterError
from utils.logging_config import get_logger
from utils.units import parse_quantity

logger = get_logger(__name__)

TERMINAL_REF = r'^.+\.(left|right)$'

# Electrical properties and the unit their strings are converted to.
QUANTITY_PARAMS = {
    'resistance': 'ohm',
    'voltage': 'volt',
}

CIRCUIT_SCHEMA: Dict[str, Any] = {
    'solver': {
        'type': 'dict',
        'required': False,
        'schema': {
            'max_paths': {'type': 'integer', 'min': 1},
            'bulb_min_current': {'type': 'number', 'min': 0},
            'led_min_current': {'type': 'number', 'min': 0},
            'led_max_current': {'type': 'number', 'min': 0},
        },
    },
    'components': {
        'type': 'list',
        'required': True,
        'schema': {
            'type': 'dict',
            'schema': {
                'id': {'type': 'string', 'required': True, 'empty': False},
                'type': {'type': 'string', 'required': True},
                'params': {'type': 'dict', 'required': False, 'nullable': True},
                'position': {
                    'type': 'list',
                    'minlength': 2,
                    'maxlength': 2,
                    'schema': {'type': 'number'},
                    'required': False,
                },
                'rotation': {'type': 'number', 'required': False},
            },
        },
    },
    'wires': {
        'type': 'list',
        'required': False,
        'schema': {
            'type': 'dict',
            'schema': {
                'id': {'type': 'string', 'required': False},
                'from': {'type': 'string', 'required': True, 'regex': TERMINAL_REF},
                'to': {'type': 'string', 'required': True, 'regex': TERMINAL_REF},
            },
        },
    },
}

SWEEP_SCHEMA: Dict[str, Any] = {
    'sweep': {
        'type': 'list',
        'required': True,
        'minlength': 1,
        'schema': {
            'type': 'dict',
            'schema': {
                'component': {'type': 'string', 'required': True},
                'param': {'type': 'string', 'required': True},
                'range': {
                    'type': 'list',
                    'minlength': 2,
                    'maxlength': 2,
                    'schema': {'type': 'number', 'coerce': float},
                    'required': False,
                    'excludes': 'values',
                },
                'points': {'type': 'integer', 'min': 1, 'required': False, 'dependencies': 'range'},
                'scale': {
                    'type': 'string',
                    'allowed': ['linear', 'log'],
                    'required': False,
                },
                'values': {'type': 'list', 'required': False, 'excludes': 'range'},
            },
        },
    },
}


def validate_schema(data: Any, schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate YAML data against a Cerberus schema.

    Args:
        data: The loaded YAML document.
        schema: The Cerberus schema definition.

    Returns:
        The validated (normalized) document.

    Raises:
        NetlistError: If the document is not a mapping or validation fails.
    """
    if not isinstance(data, dict):
        raise NetlistError(f"Expected a YAML mapping at top level, got {type(data).__name__}.")
    validator = Validator(schema)
    if not validator.validate(data):
        errors = validator.errors
        logger.error("YAML schema validation errors: %s", errors)
        raise NetlistError("YAML schema validation failed: " + str(errors))
    return validator.document


def _read_yaml(path: Union[str, Path]) -> Any:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise NetlistError(f"Failed to read YAML '{path}': {exc}")


def convert_params(comp_id: str, params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Turn quantity strings ("4.7 kohm", "9 V", "inf") into floats.
    Other properties pass through unchanged.
    """
    converted = dict(params or {})
    for key, unit in QUANTITY_PARAMS.items():
        if key in converted and converted[key] is not None:
            try:
                converted[key] = parse_quantity(converted[key], unit)
            except ValueError as exc:
                raise ParameterError(f"Component '{comp_id}' property '{key}': {exc}")
    if 'is_on' in converted and not isinstance(converted['is_on'], bool):
        raise ParameterError(f"Component '{comp_id}' property 'is_on' must be true or false.")
    return converted


def parse_circuit(data: Any) -> CircuitDefinition:
    """
    Build a CircuitDefinition from an already loaded YAML document.

    Raises:
        NetlistError: On schema violations, duplicate ids or unknown component types.
        ParameterError: On unreadable property values.
    """
    doc = validate_schema(data, CIRCUIT_SCHEMA)
    definition = CircuitDefinition()

    for cdoc in doc['components']:
        comp_id = cdoc['id']
        params = convert_params(comp_id, cdoc.get('params') or {})
        kwargs = {}
        if 'position' in cdoc:
            kwargs['position'] = tuple(cdoc['position'])
        if 'rotation' in cdoc:
            kwargs['rotation'] = cdoc['rotation']
        try:
            component = create_component(cdoc['type'], comp_id, params, **kwargs)
            definition.add_component(component)
        except ParameterError:
            raise
        except CircuitError as exc:
            raise NetlistError(f"Cannot add component '{comp_id}': {exc}")

    for wdoc in doc.get('wires', []) or []:
        a = TerminalRef.parse(wdoc['from'])
        b = TerminalRef.parse(wdoc['to'])
        for ref in (a, b):
            if not definition.has_component(ref.component_id):
                # Kept: the solver ignores dangling wires.
                logger.warning("Wire %s -> %s refers to unknown component '%s'.", a, b, ref.component_id)
        try:
            definition.add_wire(a, b, wdoc.get('id'))
        except CircuitError as exc:
            raise NetlistError(f"Cannot add wire {a} -> {b}: {exc}")

    # Loading is not an edit.
    definition.revision = 0
    return definition


def load_circuit(path: Union[str, Path]) -> CircuitDefinition:
    """
    Parse a YAML circuit file into a CircuitDefinition.

    Args:
        path: Path to the YAML circuit file.

    Raises:
        NetlistError: On read, schema or structural errors.
        ParameterError: On unreadable property values.
    """
    definition = parse_circuit(_read_yaml(path))
    logger.info("Loaded circuit '%s': %d components, %d wires",
                path, len(definition.components), len(definition.wires))
    return definition


def load_solver_config(path: Union[str, Path]) -> SolverConfig:
    """Read the optional `solver:` section of a circuit file."""
    doc = validate_schema(_read_yaml(path), CIRCUIT_SCHEMA)
    try:
        return SolverConfig.from_dict(doc.get('solver') or {})
    except ValueError as exc:
        raise NetlistError(f"Invalid solver settings in '{path}': {exc}")


def parse_sweep_config(data: Any) -> Dict[str, Any]:
    doc = validate_schema(data, SWEEP_SCHEMA)
    for entry in doc['sweep']:
        if 'range' not in entry and 'values' not in entry:
            raise NetlistError(f"Sweep of {entry['component']}.{entry['param']} needs 'range' or 'values'.")
        if 'range' in entry and entry.get('scale') == 'log' and min(entry['range']) <= 0:
            raise NetlistError("Log-scale sweep range must be positive.")
        if 'range' in entry and any(math.isinf(v) for v in entry['range']):
            raise NetlistError("Sweep range must be finite.")
    return doc


def load_sweep_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Parse and validate a sweep configuration YAML file.
    """
    return parse_sweep_config(_read_yaml(path))
