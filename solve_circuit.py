#!/usr/bin/env python
import argparse
import logging
import sys

from utils.logging_config import setup_logging, get_logger
from inout.yaml_parser import load_circuit, load_solver_config, load_sweep_config
from evaluation.sweep import sweep
from core.exceptions import CircuitError
from core.solver import solve
from utils.formatting import (describe_state, format_current, format_power,
                              format_resistance, format_voltage)

logger = get_logger(__name__)


def print_result(definition, result) -> None:
    state = result.circuit_state
    print(describe_state(state))
    print(f"  Voltage:    {format_voltage(state.total_voltage)}")
    print(f"  Current:    {format_current(state.total_current)}")
    print(f"  Resistance: {format_resistance(state.total_resistance)}")
    print(f"  Power:      {format_power(state.total_power)}")
    if result.branches:
        kind = "parallel" if len(result.branches) > 1 else "series"
        print(f"  Branches ({kind}):")
        for ids in result.branches:
            print(f"    {' -> '.join(ids) or '(wire)'}")
    for comp in definition.components:
        reading = result.component_updates[comp.id]
        line = (f"  {comp.id:<12} {comp.type_name:<10} I={format_current(reading.current)}"
                f"  V={format_voltage(reading.voltage_drop)}  P={format_power(reading.power)}")
        if reading.is_on is not None:
            line += "  ON" if reading.is_on else "  OFF"
        print(line)


def main(argv=None) -> int:
    """
    Solve a DC circuit described in a YAML file.

    Command-line arguments:
      --circuit: Path to the YAML circuit file.
      --sweep: Optional YAML sweep configuration.
      --dump: Optional CSV path for the sweep table.
      --log-file: Optional log file.
      --verbose: Enable DEBUG logging.
    """
    parser = argparse.ArgumentParser(description="Solve a DC circuit of batteries, resistors, bulbs and LEDs.")
    parser.add_argument("--circuit", required=True, help="Path to the YAML circuit file.")
    parser.add_argument("--sweep", help="Path to a YAML sweep configuration file.", default=None)
    parser.add_argument("--dump", help="Path to write the sweep table as CSV.", default=None)
    parser.add_argument("--log-file", help="Also write logs to this file.", default=None)
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        definition = load_circuit(args.circuit)
        solver_config = load_solver_config(args.circuit)
    except CircuitError as e:
        logger.error("Circuit load failed: %s", e)
        return 1

    result = solve(definition, solver_config)
    print_result(definition, result)

    if args.sweep:
        try:
            sweep_config = load_sweep_config(args.sweep)
        except CircuitError as e:
            logger.error("Sweep configuration error: %s", e)
            return 1
        sweep_result = sweep(definition, sweep_config, solver_config)
        print(f"Sweep completed: {sweep_result.stats['points']} points in {sweep_result.stats['elapsed']:.3f} s")
        for err in sweep_result.errors:
            logger.warning(err)
        if args.dump:
            sweep_result.to_dataframe().to_csv(args.dump, index=False)
            print(f"Sweep results dumped to {args.dump}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
