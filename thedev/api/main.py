import logging
import random

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..bookings.ledger import BookingLedger
from ..config import AppConfig, load_config
from ..courses.catalog import CourseCatalog
from ..errors import TheDevError
from ..feedback.collector import FeedbackCollector
from ..sheets.client import GoogleSheetsClient
from .routers import booking, courses, feedback, meta

logger = logging.getLogger(__name__)


async def handle_app_error(request: Request, exc: TheDevError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc.message} {exc.details or ''}".rstrip())
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    details = "; ".join(f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body", "details": details})


def create_app(
    config: AppConfig | None = None,
    sheets_client: GoogleSheetsClient | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    """Build the API with one shared sheets client injected into every service

    Raises ConfigurationError when a configured credentials file is missing,
    so a broken deployment fails at startup instead of on the first request.
    """
    config = config or load_config()
    sheets_client = sheets_client or GoogleSheetsClient.from_config(config)

    app = FastAPI(title="theDev Backend API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.sheets_client = sheets_client
    app.state.course_catalog = CourseCatalog(sheets_client)
    app.state.booking_ledger = BookingLedger(sheets_client, timezone=config.timezone)
    app.state.feedback_collector = FeedbackCollector(sheets_client, timezone=config.timezone, rng=rng)

    app.add_exception_handler(TheDevError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    app.include_router(meta.router)
    app.include_router(courses.router)
    app.include_router(booking.router)
    app.include_router(feedback.router)

    return app
