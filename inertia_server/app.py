from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI  # type: ignore[import-not-found]

from .adapters import flash, inertia_page, install_inertia
from .config import config
from .logging_config import setup_logging
from .protocol import lazy


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging()
    logger.info("Demo application started")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Inertia Server Demo",
        description="Example host application for the Inertia protocol adapter.",
        version="0.1.0",
        lifespan=lifespan,
    )
    install_inertia(app)

    @app.get("/")
    @inertia_page("Home")
    async def home():
        return {
            "greeting": "Hello",
            "stats": lazy(lambda: {"visits": 1}),
        }

    @app.get("/saved")
    @inertia_page("Home")
    @flash("Saved")
    async def saved():
        return {"greeting": "Hello"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "inertia_server.app:app",
        host=config.SERVER.HOST,
        port=config.SERVER.PORT,
        reload=False,
    )
