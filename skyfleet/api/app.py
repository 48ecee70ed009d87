"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from skyfleet.api.routes import (  # noqa: E402
    aircraft,
    aircraft_types,
    airports,
    financials,
    flights,
    jobs,
    notifications,
)
from skyfleet.config import config  # noqa: E402
from skyfleet.contracts.errors import (  # noqa: E402
    DomainError,
    InvariantViolation,
    MultipleActiveFlights,
    RelationNotLoaded,
)
from skyfleet.persistence.errors import (  # noqa: E402
    ConcurrencyConflictError,
    DocumentAlreadyExistsError,
    DocumentNotFoundError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=config.logging.level, format=config.logging.format)
    logger.info("SkyFleet API starting (log level %s)", config.logging.level)
    yield


app = FastAPI(
    title="SkyFleet API",
    description="Multiplayer flight simulation backend",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.api.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(aircraft.router, prefix="/api")
app.include_router(aircraft_types.router, prefix="/api")
app.include_router(airports.router, prefix="/api")
app.include_router(flights.router, prefix="/api")
app.include_router(jobs.router, prefix="/api")
app.include_router(notifications.router, prefix="/api")
app.include_router(financials.router, prefix="/api")


# ------------------------------------------------------------------
# Error translation
# ------------------------------------------------------------------


# Broken stored state or a missing load: a server bug, not a client mistake
@app.exception_handler(RelationNotLoaded)
@app.exception_handler(MultipleActiveFlights)
async def server_invariant_handler(request: Request, exc: InvariantViolation):
    logger.error("Invariant violated on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content=exc.to_dict())


@app.exception_handler(InvariantViolation)
async def invariant_violation_handler(request: Request, exc: InvariantViolation):
    return JSONResponse(status_code=422, content=exc.to_dict())


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return JSONResponse(status_code=409, content=exc.to_dict())


@app.exception_handler(DocumentNotFoundError)
async def not_found_handler(request: Request, exc: DocumentNotFoundError):
    return JSONResponse(
        status_code=404,
        content={"error": "NOT_FOUND", "message": str(exc)},
    )


@app.exception_handler(DocumentAlreadyExistsError)
async def already_exists_handler(request: Request, exc: DocumentAlreadyExistsError):
    return JSONResponse(
        status_code=409,
        content={"error": "ALREADY_EXISTS", "message": str(exc)},
    )


@app.exception_handler(ConcurrencyConflictError)
async def concurrency_conflict_handler(request: Request, exc: ConcurrencyConflictError):
    return JSONResponse(
        status_code=409,
        content={
            "error": "CONCURRENCY_CONFLICT",
            "message": str(exc),
            "details": {"expected_version": exc.expected, "actual_version": exc.actual},
        },
    )


@app.get("/api/health")
async def health():
    return {"status": "ok"}
