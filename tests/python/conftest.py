import pytest

from seo_builder import reset_configuration


@pytest.fixture(autouse=True)
def fresh_configuration():
    reset_configuration()
    yield
    reset_configuration()
