"""
QKart Cart Service - FastAPI Application

Single entry point for the cart HTTP API; `app` is the ASGI application
served by the platform (Vercel) or any ASGI server.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from qkart.config import Settings
from qkart.logging import get_logger
from qkart.routers import api_router
from qkart.services.database import Database

logger = get_logger(__name__)


def create_app(database: Database | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI app.

    With ``database`` given (tests), it is used as-is; otherwise one is
    created from ``settings`` (or the environment) at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database is None:
            app.state.database = await Database.create(settings or Settings.from_env())
            logger.info("Database initialized")
        yield

    app = FastAPI(
        title="QKart Cart Service",
        description="Product catalog, per-user carts and wallet checkout",
        version="1.0.0",
        lifespan=lifespan,
    )
    if database is not None:
        app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok"})

    return app


app = create_app()
