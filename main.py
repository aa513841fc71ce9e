import sys
import time
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from weather_tracker import __version__
from weather_tracker.api import health_router, v1_router
from weather_tracker.config.config import config, load_config
from weather_tracker.exceptions.weather import WeatherServiceError
from weather_tracker.utils.logging_config import setup_logging

# Configure logging
setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    The gateway holds no resources between requests; startup only reports
    whether the provider key is present so a misconfigured deployment shows
    up in the logs before the first lookup fails.
    """
    logger.info("Starting Weather Tracker application")

    if not load_config().openweather_api_key:
        logger.warning("OPENWEATHER_API_KEY is not set, weather lookups will fail")

    try:
        yield
    finally:
        logger.info("Shutting down Weather Tracker")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Weather Tracker API",
        description="""
        ## Weather Tracker API

        Current weather lookups proxied to OpenWeatherMap.

        ### Features:
        - **Lookup by city**: `{"city": "London"}`
        - **Lookup by coordinates**: `{"lat": 51.51, "lon": -0.13}`
        - **Stable errors**: failures are returned as `{"error": "..."}`

        ### Authentication:
        If an API token is configured, include it as a Bearer token in the Authorization header.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                process_time=process_time,
            )

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                process_time=process_time,
            )
            raise

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            path=request.url.path,
            error=str(exc),
            exc_info=True,
        )

        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.exception_handler(WeatherServiceError)
    async def weather_service_exception_handler(request: Request, exc: WeatherServiceError):
        """Render weather errors raised outside the gateway route."""
        logger.warning(
            "Weather service error",
            path=request.url.path,
            status_code=exc.status_code,
            error=exc.message,
        )

        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # HTTP exception handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent formatting."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            path=request.url.path,
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report schema violations as client errors."""
        logger.info("Request validation failed", path=request.url.path, errors=exc.errors())

        return JSONResponse(status_code=400, content={"error": "Invalid request"})

    app.include_router(health_router)
    app.include_router(v1_router)

    # Root endpoint (hide from swagger)
    @app.get("/", tags=["Root"], include_in_schema=False)
    async def root():
        """Root endpoint providing basic system information."""
        return {
            "message": "Weather Tracker API",
            "version": __version__,
            "status": "running",
            "timestamp": time.time(),
            "docs": "/docs",
            "redoc": "/redoc",
        }

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Weather Tracker API",
            version=__version__,
            description="Current weather lookups proxied to OpenWeatherMap",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
            }
        }

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi

    return app


# Create the application instance
app = create_app()


def main():
    logger.info(
        f"Starting Weather Tracker server in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
    )

    try:
        uvicorn.run(
            app,
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower(),
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
