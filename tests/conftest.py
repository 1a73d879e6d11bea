import sys
import os
import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


class FixedUniform:
    """Random source stub that always returns the same draw."""

    def __init__(self, value: float):
        self.value = value
        self.calls = []

    def uniform(self, low, high):
        self.calls.append((low, high))
        return self.value


@pytest.fixture
def make_rng():
    return FixedUniform


@pytest.fixture
def zero_rng():
    return FixedUniform(0.0)
