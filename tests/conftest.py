import importlib.util

import pytest


def require_module(module_name):
    """
    Checks if a module exists. If not, skips the test or module.
    """
    spec = importlib.util.find_spec(module_name)
    if spec is None:
        pytest.skip(
            f"Module '{module_name}' not found. Skipping.", allow_module_level=True
        )


@pytest.fixture
def line_points():
    """Five samples on y = x + 1."""
    return {1: 2, 2: 3, 3: 4, 4: 5, 5: 6}


@pytest.fixture
def zigzag_points():
    """Five evenly spaced samples alternating between 0 and 1."""
    return {0: 0, 1: 1, 2: 0, 3: 1, 4: 0}
