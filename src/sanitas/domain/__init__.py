"""Domain layer for SANITAS.

Pure transforms that need no external collaborator: numeric normalization and
clamping, markup escaping, scalar/sequence dispatch, error types and the
named failure policies.

Dependency rule: this package must not import `sanitas.adapters`,
`sanitas.interfaces`, `sanitas.service_layer` or `sanitas.bootstrap`.
"""
