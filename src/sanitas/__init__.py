"""SANITAS

Stateless sanitization primitives for untrusted or loosely-formatted input:
locale-ambiguous number parsing, ampersand-safe entity escaping, URL slugs
and length-bounded floats for fixed-width storage fields.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
