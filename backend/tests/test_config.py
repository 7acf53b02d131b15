"""
Tests for application settings.
"""

from gps_collector.config import Settings


class TestSettings:
    """Tests for Settings parsing."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///./gps_points.db"
        assert settings.trust_client_metrics is False
        assert settings.latest_default_limit == 50
        assert settings.latest_max_limit == 500

    def test_postgres_url_fixed(self):
        settings = Settings(_env_file=None, database_url="postgres://u:p@db/gps")
        assert settings.database_url == "postgresql://u:p@db/gps"

    def test_cors_origins_from_string(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_trust_client_metrics_from_env(self, monkeypatch):
        monkeypatch.setenv("TRUST_CLIENT_METRICS", "true")
        settings = Settings(_env_file=None)
        assert settings.trust_client_metrics is True
