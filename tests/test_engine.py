from __future__ import annotations

from pathlib import Path

import pytest

from broker_landing.config import Settings
from broker_landing.db.engine import create_engine, create_engine_from_settings


def test_create_engine_supports_sqlite_path(tmp_path: Path) -> None:
    db_path = tmp_path / "landing.db"

    engine = create_engine(sqlite_path=db_path)

    expected_url = f"sqlite+pysqlite:///{db_path.resolve().as_posix()}"
    assert str(engine.url) == expected_url


def test_create_engine_rejects_conflicting_configuration(tmp_path: Path) -> None:
    db_path = tmp_path / "landing.db"

    with pytest.raises(ValueError):
        create_engine(connection_string="sqlite:///ignored.db", sqlite_path=db_path)


def test_create_engine_defaults_to_in_memory_sqlite() -> None:
    engine = create_engine()

    assert engine.dialect.name == "sqlite"
    assert engine.url.database == ":memory:"


def test_create_engine_from_settings_uses_sqlite_path(tmp_path: Path) -> None:
    settings = Settings(sqlite_path=tmp_path / "from-settings.db")

    engine = create_engine_from_settings(settings)

    assert engine.url.database == (tmp_path / "from-settings.db").resolve().as_posix()
