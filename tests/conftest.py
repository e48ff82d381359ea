import pytest

import herald
from herald import HeraldSettings, LevelRegistry


@pytest.fixture
def settings():
    return HeraldSettings(function_name=None, function_version=None, fast_time=False)


@pytest.fixture
def registry(settings):
    registry = LevelRegistry(settings)
    yield registry
    registry.reset()


@pytest.fixture(autouse=True)
def _reset_default_registry():
    yield
    herald.reset()
