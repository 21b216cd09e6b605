# core/exceptions.py

class CircuitError(Exception):
    """Base exception for circuit definition and loading errors."""
    pass

class ParameterError(CircuitError):
    """Raised when a component property cannot be interpreted."""
    pass

class NetlistError(CircuitError):
    """Raised when a circuit or sweep file cannot be read or fails validation."""
    pass
