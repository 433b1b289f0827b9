"""Interfaces (application boundary) for SANITAS.

Defines framework-free contracts for the external capabilities the
sanitizers rely on: entity encoding/decoding and best-effort ASCII
transliteration.

Dependency rule: this package is independent, do not import from any
`sanitas.*` modules. It may be imported by `sanitas.service_layer`,
`sanitas.adapters`, and `sanitas.bootstrap`.
"""
