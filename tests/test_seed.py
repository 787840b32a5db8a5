"""Database seed behavior tests."""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from priority_delivery.core.config import settings
from priority_delivery.db.base import Base
from priority_delivery.db.seed import ensure_blackout_settings
from priority_delivery.services.delivery_window import FROM_WEEKDAYS_KEY, TO_TIME_KEY, load_blackout_config
from priority_delivery.services.settings_service import SettingsConfigurationProvider, get_blackout_settings


def _build_test_engine(db_file: Path) -> Engine:
    return create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )


def test_ensure_blackout_settings_writes_defaults_in_dev(tmp_path: Path, monkeypatch) -> None:
    """Seed should store parseable default settings in development."""
    engine = _build_test_engine(tmp_path / "seed_dev.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    monkeypatch.setattr(settings, "app_env", "dev")
    monkeypatch.setattr(settings, "default_blackout_from_weekdays", "0")
    monkeypatch.setattr(settings, "default_blackout_to_time", "18,30")

    with testing_session_local() as session:
        assert ensure_blackout_settings(session) is True

    with testing_session_local() as session:
        values = get_blackout_settings(session)
        config = load_blackout_config(SettingsConfigurationProvider(session))

    assert values[FROM_WEEKDAYS_KEY] == "0"
    assert values[TO_TIME_KEY] == "18,30,00"
    assert config.from_weekdays == frozenset({0})


def test_ensure_blackout_settings_keeps_existing_values(tmp_path: Path, monkeypatch) -> None:
    """Seed should not overwrite settings an admin already saved."""
    engine = _build_test_engine(tmp_path / "seed_existing.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(settings, "app_env", "dev")

    with testing_session_local() as session:
        assert ensure_blackout_settings(session) is True
        assert ensure_blackout_settings(session) is False


def test_ensure_blackout_settings_skips_non_dev(tmp_path: Path, monkeypatch) -> None:
    """Seed should not write settings outside development."""
    engine = _build_test_engine(tmp_path / "seed_prod.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(settings, "app_env", "prod")

    with testing_session_local() as session:
        assert ensure_blackout_settings(session) is False
        assert all(value is None for value in get_blackout_settings(session).values())


def test_invalid_default_is_skipped(tmp_path: Path, monkeypatch) -> None:
    engine = _build_test_engine(tmp_path / "seed_invalid.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(settings, "app_env", "dev")
    monkeypatch.setattr(settings, "default_blackout_from_time", "noon")

    with testing_session_local() as session:
        assert ensure_blackout_settings(session) is False
        assert all(value is None for value in get_blackout_settings(session).values())
