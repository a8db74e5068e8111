import pytest

from schematree import Arena


@pytest.fixture
def arena():
    with Arena("test") as arena:
        yield arena


@pytest.fixture
def strict():
    with Arena("strict", strict=True) as arena:
        yield arena
