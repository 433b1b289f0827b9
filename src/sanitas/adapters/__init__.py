"""Adapters (infrastructure) for SANITAS.

Provide concrete implementations of the interfaces in `sanitas.interfaces`
(entity codec, transliterator), built on the standard library's `html`,
`html.entities` and `unicodedata` modules.

Dependency rule: may import `sanitas.domain` and `sanitas.interfaces`; the
domain must not import this package.
"""
