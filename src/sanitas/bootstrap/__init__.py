"""Bootstrap (composition root) for SANITAS.

Assembles the default sanitizer: wires the concrete adapters (entity codec,
transliterator) into the service-layer operations, reads configuration, and
exposes the result as a small facade for entrypoints and library users.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `sanitas.adapters`, `sanitas.service_layer`,
  `sanitas.interfaces`, `sanitas.domain`, and `sanitas.config`.
- Inner layers must not import `sanitas.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No sanitizing rules live here; this is assembly only.
"""

from .bootstrap import Sanitizer, bootstrap

__all__ = ["Sanitizer", "bootstrap"]
