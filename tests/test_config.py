from __future__ import annotations

from pathlib import Path

import pytest

from broker_landing.config import DEFAULT_BRAND_NAME, Settings


def test_from_env_uses_defaults_for_empty_environment():
    settings = Settings.from_env({})

    assert settings.database_url is None
    assert settings.sqlite_path is None
    assert settings.demo_slug == "demo"
    assert settings.admin_prefix == "/admin"
    assert settings.brand_name == DEFAULT_BRAND_NAME
    assert settings.query_timeout is None


def test_from_env_reads_landing_variables():
    settings = Settings.from_env(
        {
            "LANDING_DATABASE_URL": "postgresql+psycopg://localhost/landing",
            "DATABASE_URL": "sqlite:///ignored.db",
            "LANDING_DEMO_SLUG": "showcase",
            "LANDING_ADMIN_PREFIX": "/painel",
            "LANDING_BRAND_NAME": "Casa Nova",
            "LANDING_QUERY_TIMEOUT": "2.5",
            "LANDING_SQLITE_PATH": "data/landing.db",
        }
    )

    assert settings.database_url == "postgresql+psycopg://localhost/landing"
    assert settings.demo_slug == "showcase"
    assert settings.admin_prefix == "/painel"
    assert settings.brand_name == "Casa Nova"
    assert settings.query_timeout == 2.5
    assert settings.sqlite_path == Path("data/landing.db")


def test_from_env_falls_back_to_database_url():
    settings = Settings.from_env({"DATABASE_URL": "sqlite:///landing.db"})

    assert settings.database_url == "sqlite:///landing.db"


def test_from_env_loads_dotenv_without_overriding(tmp_path, monkeypatch):
    dotenv = tmp_path / ".env"
    dotenv.write_text("LANDING_BRAND_NAME=From Dotenv\nLANDING_DEMO_SLUG=dotenv-demo\n", encoding="utf-8")
    monkeypatch.delenv("LANDING_BRAND_NAME", raising=False)
    monkeypatch.setenv("LANDING_DEMO_SLUG", "from-env")

    settings = Settings.from_env(dotenv_path=dotenv)

    assert settings.brand_name == "From Dotenv"
    assert settings.demo_slug == "from-env"
    monkeypatch.delenv("LANDING_BRAND_NAME", raising=False)


@pytest.mark.parametrize(
    "kwargs",
    [{"demo_slug": ""}, {"admin_prefix": "admin"}, {"query_timeout": 0}],
)
def test_settings_reject_invalid_values(kwargs):
    with pytest.raises(ValueError):
        Settings(**kwargs)
