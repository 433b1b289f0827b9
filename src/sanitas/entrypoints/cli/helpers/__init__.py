"""CLI helpers for SANITAS.

Utilities used by the command-line interface: NAME=LEVEL logger option
parsing and a notice emitter that writes to stderr with an emoji→ASCII fallback.
"""

from .messages import warn

__all__ = ["warn"]
