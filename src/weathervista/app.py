"""Main FastAPI application."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from loguru import logger
from opentelemetry import metrics
from opentelemetry.exporter.prometheus import PrometheusMetricReader
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.resources import Resource
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

from .api import health, routes
from .core.config import settings
from .core.errors import WeatherProxyError


def setup_logging():
    """Configure loguru with the level from settings, writing to stderr."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> | {extra}",
        level=settings.LOG_LEVEL,
        serialize=False,
        colorize=True,
        backtrace=True,
        diagnose=False,  # locals include the API key
    )

    logger.info("Logging configured", level=settings.LOG_LEVEL)


def setup_metrics():
    """Configure OpenTelemetry metrics with the Prometheus exporter."""
    reader = PrometheusMetricReader()

    resource = Resource.create(
        {
            "service.name": "weathervista-api",
            "service.version": "0.1.0",
        }
    )

    provider = MeterProvider(
        resource=resource,
        metric_readers=[reader],
    )
    metrics.set_meter_provider(provider)

    logger.info("OpenTelemetry metrics configured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration on startup and shutdown."""
    logger.info("Starting WeatherVista API")

    logger.info(
        "Configuration loaded",
        weather_api_configured=settings.weather_api_configured,
        maps_api_configured=bool(settings.GOOGLE_MAPS_API_KEY),
        openweather_base_url=settings.OPENWEATHER_BASE_URL,
        default_location=settings.DEFAULT_LOCATION,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        environment=settings.ENVIRONMENT,
    )

    if not settings.weather_api_configured:
        logger.warning("WEATHERMAP_API_KEY is not set; weather requests will fail with 500")

    yield

    logger.info("Shutting down WeatherVista API")


setup_logging()
setup_metrics()

app = FastAPI(
    title="WeatherVista API",
    description="Weather proxy that hides the OpenWeatherMap credential from dashboard clients",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.LOG_LEVEL == "DEBUG" else None,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(routes.router, tags=["Weather"])


@app.get("/metrics", include_in_schema=False)
async def metrics_endpoint():
    """Prometheus metrics endpoint."""
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)


@app.exception_handler(WeatherProxyError)
async def weather_proxy_error_handler(request: Request, exc: WeatherProxyError):
    """Render proxy errors as ``{"error": message}`` with their status."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled errors and return a generic 500."""
    logger.exception(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
    )

    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )


FastAPIInstrumentor.instrument_app(app)

logger.info("FastAPI application created")
