import pytest

from helpers import GROUP_ID
from widget_core.container import SharedContainer


@pytest.fixture
def container(tmp_path):
    c = SharedContainer(tmp_path / "containers", GROUP_ID)
    c.create()
    yield c
    c.close()


@pytest.fixture
def missing_container(tmp_path):
    """A container whose app group directory was never created."""
    c = SharedContainer(tmp_path / "containers", GROUP_ID)
    yield c
    c.close()
