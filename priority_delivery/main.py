"""FastAPI entrypoint for the priority delivery service."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from priority_delivery.api.v1.api import api_router
from priority_delivery.core.config import settings
from priority_delivery.db import session as db_session
from priority_delivery.db.base import Base
from priority_delivery.db.seed import ensure_blackout_settings

logger = logging.getLogger(__name__)

app = FastAPI(title="Priority Delivery API", debug=settings.debug)
app.include_router(api_router, prefix="/api/v1")


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.on_event("startup")
def startup() -> None:
    configure_logging()
    logger.info("Delivery reference time zone: %s", settings.delivery_time_zone)
    Base.metadata.create_all(bind=db_session.engine)
    with db_session.SessionLocal() as session:
        try:
            seeded = ensure_blackout_settings(session)
            logger.info("[BOOTSTRAP] default blackout settings written: %s", "yes" if seeded else "no")
        except Exception:
            logger.exception("[BOOTSTRAP] Seed/bootstrap failed; continuing startup.")


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
