"""
Gatekeeper Configuration Tests
"""

from gatekeeper.config import get_config, load_config, reset_config


class TestConfig:
    """Test environment-driven configuration."""

    def test_load_config_defaults(self, monkeypatch):
        for name in (
            "GATEKEEPER_ROUTE_TABLE_PATH",
            "GATEKEEPER_FALLBACK_PATH",
            "GATEKEEPER_LOGIN_PATH",
            "GATEKEEPER_STRICT_FEATURES",
            "GATEKEEPER_DEBUG",
            "GATEKEEPER_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        config = load_config()

        assert config.routes.table_path is None
        assert config.routes.fallback_path == "/unauthorized"
        assert config.routes.login_path == "/auth"
        assert config.routes.strict_features is False
        assert config.debug is False
        assert config.log_level == "INFO"

    def test_load_config_from_env(self, monkeypatch):
        monkeypatch.setenv("GATEKEEPER_ROUTE_TABLE_PATH", "/etc/gatekeeper/routes.json")
        monkeypatch.setenv("GATEKEEPER_FALLBACK_PATH", "/403")
        monkeypatch.setenv("GATEKEEPER_LOGIN_PATH", "/login")
        monkeypatch.setenv("GATEKEEPER_STRICT_FEATURES", "yes")
        monkeypatch.setenv("GATEKEEPER_DEBUG", "1")
        monkeypatch.setenv("GATEKEEPER_LOG_LEVEL", "debug")

        config = load_config()

        assert config.routes.table_path == "/etc/gatekeeper/routes.json"
        assert config.routes.fallback_path == "/403"
        assert config.routes.login_path == "/login"
        assert config.routes.strict_features is True
        assert config.debug is True
        assert config.log_level == "DEBUG"

    def test_get_config_is_cached(self):
        reset_config()
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first
        reset_config()
