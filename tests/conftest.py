import pytest

from tafqeet.config import reload_config


@pytest.fixture
def tafqeet_env(monkeypatch):
    """Set TAFQEET_* variables for one test and reload the global config"""

    def apply(**values):
        for key, value in values.items():
            monkeypatch.setenv(f"TAFQEET_{key.upper()}", str(value))
        return reload_config()

    yield apply

    monkeypatch.undo()
    reload_config()
