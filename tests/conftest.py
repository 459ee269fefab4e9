import pytest

from vecmath.config import reset_config


@pytest.fixture(autouse=True)
def default_config():
    reset_config()
    yield
    reset_config()
