import pytest

from fluidkit.config import reset_config


@pytest.fixture(autouse=True)
def _reset_config():
    # the tests change the global config, so every test starts from the defaults
    reset_config()
    yield
    reset_config()
