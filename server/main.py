from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from Gloss.errors import ConfigurationError, GlossError

from .db import init_db
from .settings import get_settings
from .schemas import ErrorResponse
from .routes.health import router as health_router
from .routes.signs import router as signs_router
from .utils.exceptions import log_error

logging.basicConfig(
    level=getattr(logging, get_settings().LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()

    # Warm the dictionary so the first request does not pay for the build
    try:
        from .services.dictionary_service import get_dictionary_provider

        get_dictionary_provider().snapshot()
    except Exception as e:
        logger.error(f"Failed to warm sign dictionary: {e}")

    yield


app = FastAPI(lifespan=lifespan, title="Sign Playback", version="0.1.0")


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    log_error(exc, logger, level="warning")
    body = ErrorResponse(message=exc.message, details={"error_code": exc.error_code, "field": exc.config_key})
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(GlossError)
async def gloss_error_handler(request: Request, exc: GlossError):
    log_error(exc, logger)
    body = ErrorResponse(message=exc.message, details={"error_code": exc.error_code, **exc.details})
    return JSONResponse(status_code=500, content=body.model_dump())


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Built-in routers
app.include_router(health_router)
app.include_router(signs_router)
