import pytest


@pytest.fixture(autouse=True)
def isolated_default_config(tmp_path, monkeypatch):
    # Keep a developer's ~/.config/almanac/config.toml out of the tests
    monkeypatch.setattr("almanac.config.DEFAULT_CONFIG_PATH", tmp_path / "absent.toml")
