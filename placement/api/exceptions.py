"""Custom exceptions and error handlers for the REST API."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class FootprintError(Exception):
    """Raised when a request's footprint cannot form a wall."""

    def __init__(self, vertex_count: int) -> None:
        self.vertex_count = vertex_count
        super().__init__(f"Footprint needs at least 2 vertices, got {vertex_count}")


def require_footprint(coordinates: list) -> None:
    if len(coordinates) < 2:
        raise FootprintError(len(coordinates))


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(FootprintError)
    async def footprint_error_handler(
        request: Request, exc: FootprintError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "footprint",
                "details": {"vertex_count": exc.vertex_count},
            },
        )
