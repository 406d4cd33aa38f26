"""
HTTP boundary for itinerary reconstruction.

Endpoints:
    POST /flight   - reconstruct source/destination (and optionally path)
    GET  /health   - liveness check
    GET  /metrics  - request counter in Prometheus text format

Run:
    python -m src.fastapi.itinerary_api
"""

import logging
import time
from typing import List, Literal, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()

from src.itinerary_router.adapters.metrics.atomic_counter import AtomicRequestCounter
from src.itinerary_router.application import ReconstructItinerary
from src.itinerary_router.config import configure_logging, load_settings
from src.itinerary_router.ports.request_counter import RequestCounter
from src.itinerary_router.schemas.result import ItineraryFailure

settings = load_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

reconstructor = ReconstructItinerary()
request_counter: RequestCounter = AtomicRequestCounter(name="flight_requests_total")

app = FastAPI(title="Flight Itinerary API")

PROMETHEUS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


# --- Pydantic Schemas (The JSON Contract) ---


class FlightRequest(BaseModel):
    # Inner lists are not length-checked here so shape errors surface as InvalidLeg
    legs: List[List[str]]
    full_path: bool = False


class FlightOkResponse(BaseModel):
    type: Literal["Ok"] = "Ok"
    source: str
    destination: str
    path: Optional[List[str]] = Field(
        default=None,
        description="Ordered airports, present only when full_path was requested",
    )


class FlightErrorResponse(BaseModel):
    type: Literal["Error"] = "Error"
    message: str


class HealthResponse(BaseModel):
    status: str


# --- Middleware ---


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Access log: client address, User-Agent, status and latency."""
    start = time.perf_counter()
    # Unhandled exceptions are logged as 500 before they propagate
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        client = request.client.host if request.client else "-"
        logger.info(
            "%s %s %s %s -> %d (%.3fms)",
            client,
            request.headers.get("user-agent", "-"),
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
        )


# --- API Endpoints ---


@app.post(
    "/flight",
    response_model=FlightOkResponse,
    response_model_exclude_none=True,
    responses={400: {"model": FlightErrorResponse}},
)
def handle_flight(request: FlightRequest):
    request_counter.increment()
    logger.info("got a new request with %d legs", len(request.legs))

    result = reconstructor.reconstruct(request.legs, full_path=request.full_path)

    if isinstance(result, ItineraryFailure):
        body = FlightErrorResponse(message=result.message)
        return JSONResponse(status_code=400, content=body.model_dump())

    body = FlightOkResponse(
        source=result.source,
        destination=result.destination,
        path=list(result.path) if result.path is not None else None,
    )
    return JSONResponse(status_code=200, content=body.model_dump(exclude_none=True))


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")


@app.get("/metrics", response_class=PlainTextResponse)
def metrics() -> PlainTextResponse:
    return PlainTextResponse(request_counter.render(), media_type=PROMETHEUS_CONTENT_TYPE)


def main() -> None:
    import uvicorn

    logger.info("starting application")
    logger.info("using host %s, port %d, %d workers", settings.host, settings.port, settings.workers)
    uvicorn.run(
        "src.fastapi.itinerary_api:app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
