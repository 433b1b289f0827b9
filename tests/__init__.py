"""SANITAS test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Several layers wired together through `sanitas.bootstrap`.
- e2e/          : The `sanitas` command line, driven through Click's CliRunner.

General guidance
- Keep unit tests deterministic; prefer small fakes over mocks at the
  collaborator boundary (entity codec, transliterator).
- Case tables are parametrized; each row reads input, then expected output.
"""
