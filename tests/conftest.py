"""Global pytest configuration for SANITAS.

Tests are marked by the top-level folder they live in (`unit`,
`integration`, `e2e`), unless they already carry that mark.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder mark to every collected item."""
    for item in items:
        relative = item.path.resolve().relative_to(TESTS_ROOT)
        folder = relative.parts[0] if len(relative.parts) > 1 else None
        if folder not in FOLDER_MARKERS:
            continue
        if not any(marker.name == folder for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, folder))
