import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from fakes import FakeContainer, FakeDocument, RecordingEffects, grid_2x2  # noqa: E402


@pytest.fixture
def grid():
    return grid_2x2()


@pytest.fixture
def document(grid):
    return FakeDocument(grid)


@pytest.fixture
def effects():
    return RecordingEffects()


@pytest.fixture
def container():
    return FakeContainer(width=1000, height=1000)
