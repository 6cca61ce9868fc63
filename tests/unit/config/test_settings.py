"""Unit tests for application settings."""

from pydantic import SecretStr

from stockroom_config.settings import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None, jwt_secret_key=SecretStr("secret"))

        assert settings.jwt_access_token_expire_days == 7
        assert settings.password_hash_rounds == 10
        assert settings.api_port == 5000

    def test_database_url_built_from_postgres_components(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        settings = Settings(
            _env_file=None,
            postgres_host="db",
            postgres_port=5433,
            postgres_user="stock",
            postgres_password=SecretStr("pw"),
            postgres_db="inventory",
        )

        assert settings.database_url == "postgresql+asyncpg://stock:pw@db:5433/inventory"

    def test_explicit_database_url_wins(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

        settings = Settings(_env_file=None, postgres_host="db")

        assert settings.database_url == "sqlite+aiosqlite:///:memory:"

    def test_cors_origins_are_split(self):
        settings = Settings(
            _env_file=None,
            api_cors_origins="http://a.example, http://b.example,",
        )

        assert settings.cors_origins == ["http://a.example", "http://b.example"]

    def test_cors_origins_accept_list(self):
        settings = Settings(
            _env_file=None,
            api_cors_origins=["http://a.example", "http://b.example"],
        )

        assert settings.cors_origins == ["http://a.example", "http://b.example"]

    def test_secret_is_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "from-env")

        settings = Settings(_env_file=None)

        assert settings.jwt_secret_key is not None
        assert settings.jwt_secret_key.get_secret_value() == "from-env"
