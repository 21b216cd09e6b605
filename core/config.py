# core/config.py
"""
Solver configuration for the DC circuit engine.
Defaults are the standard thresholds; callers may tighten or relax
the display thresholds or the path enumeration bound.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict

# Path enumeration bound (performance safeguard, not a physical limit)
MAX_PATHS = 10

# Display thresholds in amps
BULB_MIN_CURRENT = 0.001   # 1 mA minimum to glow
LED_MIN_CURRENT = 0.002    # 2 mA minimum to light
LED_MAX_CURRENT = 0.020    # 20 mA max safe current


@dataclass
class SolverConfig:
    max_paths: int = MAX_PATHS
    bulb_min_current: float = BULB_MIN_CURRENT
    led_min_current: float = LED_MIN_CURRENT
    led_max_current: float = LED_MAX_CURRENT

    def __post_init__(self):
        if self.max_paths < 1:
            raise ValueError(f"max_paths must be at least 1, got {self.max_paths}")
        if self.led_min_current > self.led_max_current:
            raise ValueError("led_min_current must not exceed led_max_current")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolverConfig":
        """Build a config from a mapping, ignoring keys that are not config fields."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})
