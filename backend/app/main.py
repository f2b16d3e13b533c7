import asyncio
from contextlib import asynccontextmanager, suppress
import logging
import os
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from sqlalchemy.exc import OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import (
    api_admin,
    api_booking,
    api_extra,
    api_frequency,
    api_industry,
    api_location,
    api_ops,
    api_pricing_parameter,
)
from .core.config import settings
from .core.observability import setup_logging, setup_tracer
from .database import engine
from .middleware.security_headers import SecurityHeadersMiddleware
from .models.base import BaseModel
from .services.ops_scheduler import run_maintenance
from .utils.errors import ApiError
from .utils.json import ConsoleJSONResponse
from .utils.status_logger import register_status_listeners

setup_logging()
logger = logging.getLogger(__name__)

_BOOT_TS = time.time()


async def ops_maintenance_loop(interval_s: int) -> None:
    """Run the auto-complete job every ``interval_s`` seconds."""
    while True:
        await asyncio.sleep(interval_s)
        try:
            summary = await asyncio.to_thread(run_maintenance)
            logger.info("Maintenance summary: %s", summary)
        except OperationalError as exc:  # pragma: no cover - transient DB outage
            logger.warning("Maintenance skipped, database unavailable: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    BaseModel.metadata.create_all(bind=engine)
    maintenance = None
    interval = settings.AUTO_COMPLETE_INTERVAL_SECONDS
    if interval > 0:
        maintenance = asyncio.create_task(ops_maintenance_loop(interval))
        logger.info("Auto-complete loop every %ss", interval)
    yield
    if maintenance is not None:
        maintenance.cancel()
        with suppress(asyncio.CancelledError):
            await maintenance


app = FastAPI(
    title="Bookings Console API",
    default_response_class=ConsoleJSONResponse,
    lifespan=lifespan,
)
setup_tracer(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info("CORS origins set to: %s", settings.CORS_ORIGINS)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1024)

register_status_listeners()


@app.middleware("http")
async def catch_exceptions(request: Request, call_next):
    """Return JSON responses for errors that escape the routers and log them."""
    try:
        return await call_next(request)
    except StarletteHTTPException as exc:
        logger.error("HTTP error %s at %s: %s", exc.status_code, request.url.path, exc.detail)
        return ConsoleJSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    except OperationalError as exc:
        logger.error("Database unavailable at %s: %s", request.url.path, exc)
        return ConsoleJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Database busy, please retry"},
        )
    except Exception as exc:  # pragma: no cover - generic handler
        logger.exception("Unhandled error: %s", exc)
        return ConsoleJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return ConsoleJSONResponse(status_code=exc.status_code, content=exc.body())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return validation errors with details and log them for debugging."""
    errors = exc.errors()
    logger.warning("Validation error at %s: %s", request.url.path, errors)
    return ConsoleJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_errors(errors)},
    )


def jsonable_errors(errors) -> list:
    # ``ctx`` may hold the raw exception object.
    cleaned = []
    for err in errors:
        item = {k: v for k, v in err.items() if k != "ctx"}
        if "ctx" in err:
            item["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        cleaned.append(item)
    return cleaned


@app.get("/healthz", tags=["health"])
async def healthz():
    """Liveness probe: process can respond; does not touch the DB."""
    return {"status": "ok", "uptime_s": round(time.time() - _BOOT_TS, 1), "pid": os.getpid()}


api_prefix = settings.API_V1_STR  # usually "/api/v1"

# ─── Bookings console (versioned) ────────────────────────────────────────────────
app.include_router(api_booking.router, prefix=f"{api_prefix}/admin/bookings", tags=["bookings"])

# ─── Admin tables and settings forms (paths the dashboard already calls) ───────
app.include_router(api_admin.router, prefix="/api", tags=["admin"])
app.include_router(api_pricing_parameter.router, prefix="/api/pricing-parameters")
app.include_router(api_extra.router, prefix="/api/extras")
app.include_router(api_frequency.router, prefix="/api/industry-frequency")
app.include_router(api_location.router, prefix="/api/locations")
app.include_router(api_industry.router, prefix="/api/industries")
app.include_router(api_industry.categories_router, prefix="/api/service-categories")
app.include_router(api_ops.router, prefix="/api/cron")
