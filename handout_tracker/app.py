# handout_tracker/app.py
import logging
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

import handout_tracker.models  # ensure models are registered
from handout_tracker.core.config import Settings, load_settings
from handout_tracker.core.errors import InternalError, register_exception_handlers
from handout_tracker.initial_data import init_seed
from handout_tracker.routers import (
    admins_router,
    auth_router,
    collections_router,
    customers_router,
    handouts_router,
)
from handout_tracker.schemas import MessageResp
from handout_tracker.utils.database import Base, build_engine, build_session_factory, get_db, ping

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    if settings.uses_dev_secret:
        logger.warning("JWT_SECRET is not set, signing tokens with the development key")

    engine = engine or build_engine(settings)

    app = FastAPI(title="Handout Tracker API", version="1.0")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(auth_router.router)
    app.include_router(admins_router.router)
    app.include_router(customers_router.router)
    app.include_router(handouts_router.router)
    app.include_router(collections_router.router)

    @app.on_event("startup")
    def on_startup():
        Base.metadata.create_all(bind=engine)
        init_seed(app.state.session_factory, settings)
        logger.info("Handout tracker ready")

    @app.on_event("shutdown")
    def on_shutdown():
        engine.dispose()

    @app.get("/health-check", response_model=MessageResp, tags=["Health"])
    def health_check(db: Session = Depends(get_db)):
        if not ping(db):
            raise InternalError("database unavailable")
        return {"message": "ok"}

    return app
