# ==============================================
# Tests for Configuration Management
# ==============================================

import pytest

from geometa import config as config_module


@pytest.fixture(autouse=True)
def fresh_config():
    config_module.reset_config()
    yield
    config_module.reset_config()


class TestGetConfig:
    def test_defaults(self, monkeypatch):
        for name in ("GEOMETA_STORAGE", "GEOMETA_DATA_DIR", "GEOMETA_SLOT_KEY",
                     "GEOMETA_RENDER_DELAY", "MONGO_PORT"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr(config_module, "load_dotenv", lambda **_kwargs: False)
        cfg = config_module.get_config()
        assert cfg.storage.backend == "file"
        assert cfg.storage.slot_key == "geoMetaCountries"
        assert cfg.render.delay_seconds == 0.5
        assert cfg.mongo.port == 27017

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setattr(config_module, "load_dotenv", lambda **_kwargs: False)
        monkeypatch.setenv("GEOMETA_STORAGE", " Memory ")
        monkeypatch.setenv("GEOMETA_RENDER_DELAY", "0")
        monkeypatch.setenv("MONGO_USER", "")
        cfg = config_module.get_config()
        assert cfg.storage.backend == "memory"
        assert cfg.render.delay_seconds == 0.0
        assert cfg.mongo.user is None

    def test_same_instance_returned(self, monkeypatch):
        monkeypatch.setattr(config_module, "load_dotenv", lambda **_kwargs: False)
        assert config_module.get_config() is config_module.get_config()
