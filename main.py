"""
Expense Tracker API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.auth import router as auth_router
from api.errors import register_exception_handlers
from api.middleware import register_middleware
from api.routes import router as api_router
from config.settings import Settings, config
from core.context import AppContext

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("httpcore", "httpx", "urllib3", "aiosqlite", "asyncio"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or config
    context = AppContext.from_settings(settings)
    app = FastAPI(
        title="Expense Tracker",
        version="1.0.0",
        description="Personal expense tracking with bearer-token auth.",
        lifespan=context.lifespan,
    )
    app.state.context = context

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router, prefix="/api")
    app.include_router(api_router, prefix="/api")

    return app


configure_logging(config.debug)
app = create_app(config)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        log_level="debug" if config.debug else "info",
    )
