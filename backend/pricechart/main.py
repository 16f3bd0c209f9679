# backend/pricechart/main.py
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pricechart.core.config import settings
from pricechart.core.errors import PriceHistoryError, UpstreamError
from pricechart.logger import get_logger
from pricechart.middleware.request_logger import RequestLoggerMiddleware

# Routers
from pricechart.routers import chart, health, price

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup/shutdown; the service holds no connections or caches."""
    log.info("Starting price chart API (env=%s, upstream=%s)", settings.ENV, settings.STOOQ_CSV_URL)
    yield
    log.info("Price chart API shutdown complete")


app = FastAPI(
    title="Price Chart API",
    version="1.0.0",
    lifespan=lifespan,
)

# Middlewares
app.add_middleware(RequestLoggerMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS or ["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# ========== ERROR HANDLERS ==========
@app.exception_handler(PriceHistoryError)
async def price_history_error_handler(request: Request, exc: PriceHistoryError):
    if isinstance(exc, UpstreamError):
        log.warning("upstream failure on %s: %s", request.url.path, exc.message)
    elif exc.status_code >= 500:
        log.error("internal failure on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "query")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return JSONResponse(status_code=400, content={"error": "; ".join(parts) or "Invalid request"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception("unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": str(exc) or exc.__class__.__name__})


# ========== ROUTERS ==========
app.include_router(health.router)
app.include_router(price.router, prefix=settings.API_PREFIX)
app.include_router(chart.router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    return {
        "message": "Price Chart API",
        "version": "1.0.0",
        "api_endpoints": {
            "price_history": f"{settings.API_PREFIX}/price-history",
            "chart": f"{settings.API_PREFIX}/chart/geometry",
            "health": "/health",
        },
    }


def run():
    import uvicorn

    uvicorn.run("pricechart.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)


if __name__ == "__main__":
    run()
