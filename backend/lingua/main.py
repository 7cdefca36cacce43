"""Main FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lingua.config import settings
from lingua.api.v1.routes import generate, translation, sentences
from lingua.core.errors import EmptyInputError, LinguaError

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"

# Error category -> HTTP status; anything not listed is a server error
STATUS_BY_CATEGORY = {
    EmptyInputError.category: 400,
}


app = FastAPI(
    title=settings.app_name,
    description="Translation and sentence splitting backed by generative models",
    version=APP_VERSION,
    debug=settings.debug,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LinguaError)
async def lingua_error_handler(request: Request, exc: LinguaError) -> JSONResponse:
    """Serialize classified failures as ``{"error", "category"}``."""
    status_code = STATUS_BY_CATEGORY.get(exc.category, 500)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.message, "category": exc.category},
    )


# Include routers
app.include_router(generate.router, tags=["generate"])
app.include_router(translation.router, tags=["translation"])
app.include_router(sentences.router, tags=["sentences"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Server is reachable!", "version": APP_VERSION}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
