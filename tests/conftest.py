"""Global pytest configuration for TEXTMORPH.

Registers Hypothesis profiles (select one with HYPOTHESIS_PROFILE) and marks
every test with the name of the top-level folder it lives in.
"""

import os
from pathlib import Path

import pytest
from hypothesis import settings

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "e2e")

settings.register_profile("ci", max_examples=500, deadline=None)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default `unit` or `e2e` mark to items under those folders."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for name in FOLDER_MARKERS:
            if TESTS_ROOT / name in path.parents:
                if not any(marker.name == name for marker in item.iter_markers()):
                    item.add_marker(getattr(pytest.mark, name))
