import logging

import pytest

from terragen import PerlinNoiseGenerator


@pytest.fixture
def gen():
    return PerlinNoiseGenerator({"map_seed": "abc", "size": 16, "persistence": 0.5})


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv("TERRAGEN_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    if hasattr(root, "_terragen_handlers_installed"):
        del root._terragen_handlers_installed
