"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from placement.api.exceptions import register_exception_handlers
from placement.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Wall Placement Engine",
        description="Pointer-to-wall snapping and opening placement validation",
        version="0.1.0",
    )

    # CORS: the editor frontend runs on its own dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
