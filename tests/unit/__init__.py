"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O beyond pytest's tmp_path; use small fakes at the codec and
  transliterator boundaries.
- Keep tests small, fast, and deterministic.
"""
