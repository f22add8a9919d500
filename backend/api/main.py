"""FastAPI application for Kid Shorts Studio."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..core.errors import GenerationError
from .config import API_PREFIX, APP_DESCRIPTION, APP_TITLE, get_cors_origins, use_json_logs
from .logging import configure_logging
from .routes import generate

logger = logging.getLogger(__name__)

INVALID_BRIEF_MESSAGE = "Some brief fields are invalid. Check the form and try again."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    configure_logging(json_format=use_json_logs())
    logger.info("Kid Shorts Studio API started")

    yield


app = FastAPI(
    title=APP_TITLE,
    description=APP_DESCRIPTION,
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for the brief form
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GenerationError)
async def generation_error_handler(request: Request, exc: GenerationError):
    """Map generation failures to their status and user-facing message."""
    return JSONResponse(
        status_code=exc.http_status,
        content={"error": exc.user_message},
    )


@app.exception_handler(RequestValidationError)
async def brief_validation_handler(request: Request, exc: RequestValidationError):
    """Answer malformed briefs with the same {"error": ...} shape as every other failure."""
    logger.warning(f"Rejected brief: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"error": INVALID_BRIEF_MESSAGE},
    )


# Include routers
app.include_router(generate.router, prefix=API_PREFIX, tags=["Generation"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
