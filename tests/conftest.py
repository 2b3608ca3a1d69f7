import pytest

from tomloper.testing import sample_tree, tomloper_config  # noqa: F401


@pytest.fixture
def tree():
    return sample_tree()
