"""Application root tests."""

from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from priority_delivery.core.config import settings
from priority_delivery.db import session as db_session
from priority_delivery.db.base import Base
from priority_delivery.main import app
from priority_delivery.utils.time import current_delivery_datetime


def test_health_endpoint(tmp_path: Path, monkeypatch) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'health.db'}", connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", sessionmaker(autocommit=False, autoflush=False, bind=engine))
    monkeypatch.setattr(settings, "app_env", "test")

    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_current_delivery_datetime_uses_configured_zone(monkeypatch) -> None:
    monkeypatch.setattr(settings, "delivery_time_zone", "Europe/Warsaw")

    now = current_delivery_datetime()

    assert now.tzinfo is not None
    assert str(now.tzinfo) == "Europe/Warsaw"
