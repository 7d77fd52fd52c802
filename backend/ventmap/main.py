"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ventmap.config import settings
from ventmap.engine.errors import GridTooLargeError, InputError
from ventmap.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.ventmap_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _input_error_handler(request: Request, exc: InputError) -> JSONResponse:
    status = 413 if isinstance(exc, GridTooLargeError) else 422
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=status, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="VentMap",
        description="Overlap density of horizontal, vertical and diagonal line segments on an integer grid",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InputError, _input_error_handler)

    from ventmap.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
