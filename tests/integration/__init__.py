"""Integration tests.

Purpose
- Exercise the `Sanitizer` built by `sanitas.bootstrap` with its real
  adapters and configuration, the way library users call it.
"""
