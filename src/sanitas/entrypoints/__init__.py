"""Entrypoints (inbound adapters) for SANITAS.

Expose the sanitizers to the outside world: currently the command line.
Parse and validate inputs, call the bootstrapped `Sanitizer`, and present
results.

Dependency rule: may import `sanitas.bootstrap`; avoid importing
`sanitas.adapters` directly.
"""
