"""Service layer for SANITAS.

Operations that combine domain transforms with the external collaborators
declared in `sanitas.interfaces` (entity codec, transliterator). The
collaborators are passed in explicitly; wiring the defaults is the job of
`sanitas.bootstrap`.
"""
