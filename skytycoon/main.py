"""FastAPI main application for the airline management game."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Config
from .errors import GameError, ValidationError
from .logger import configure_logging
from .routes import (
    aircraft_router,
    airport_router,
    flight_router,
    game_router,
    network_router,
    player_router,
    transaction_router,
)

config = Config()

# Configure logging
configure_logging(config.LOG_LEVEL, config.LOG_FILE)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title="SkyTycoon API", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GameError)
async def game_error_handler(request: Request, exc: GameError):
    """Map domain errors to their HTTP status with a message body."""
    body = {"message": exc.message}
    if isinstance(exc, ValidationError) and exc.details:
        body["errors"] = exc.details
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Reject malformed request bodies and parameters with 400."""
    logger.info(f"{request.method} {request.url.path} -> 400: invalid request data")
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "SkyTycoon API", "status": "running"}


# Include API routers
app.include_router(player_router)
app.include_router(aircraft_router)
app.include_router(airport_router)
app.include_router(network_router)
app.include_router(flight_router)
app.include_router(transaction_router)
app.include_router(game_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
