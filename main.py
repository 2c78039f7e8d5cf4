"""
Vehicle Manager API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.middleware import register_middleware
from api.routes import router as health_router
from auth.jwt import TokenService
from auth.routes import router as auth_router
from config.settings import Settings
from database.session import build_engine, build_session_factory, init_db
from vehicles.routes import router as vehicles_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("sqlalchemy.engine", "asyncio"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="Vehicle Manager",
        version="1.0.0",
        description="Per-user vehicle records behind email/password auth.",
    )

    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_service = TokenService(
        settings.jwt_secret,
        expiry_seconds=settings.jwt_expiry_seconds,
        algorithm=settings.jwt_algorithm,
    )

    register_middleware(app)

    # CORS, added last so it wraps the error guard
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router, prefix="/api/auth")
    app.include_router(vehicles_router, prefix="/api/vehicles")
    app.include_router(health_router)

    @app.on_event("startup")
    async def on_startup():
        if settings.uses_default_secret:
            logger.warning("JWT_SECRET is not set; signing tokens with the development default")
        await init_db(engine)
        logger.info("Server running on port %d", settings.port)
        logger.info("Accessible at http://%s:%d", settings.host, settings.port)

    @app.on_event("shutdown")
    async def on_shutdown():
        await engine.dispose()

    return app


config = Settings()
configure_logging(config)
app = create_app(config)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
