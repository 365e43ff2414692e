"""Core primitives shared across all subsystems.

Error classes and type aliases live here so that the sequence, config and
telemetry packages can import them without circular dependencies.
"""

from . import errors, types

__all__ = ["errors", "types"]
