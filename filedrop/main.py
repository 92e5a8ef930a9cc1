"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from filedrop import __version__
from filedrop.api.deps import file_store_for
from filedrop.api.middleware import RequestSizeLimitMiddleware
from filedrop.api.routes import files
from filedrop.core.config import Settings, settings
from filedrop.core.errors import FileDropError
from filedrop.core.logging import setup_logging

logger = logging.getLogger(__name__)

# Room for multipart boundaries and part headers on top of the file bytes
MULTIPART_OVERHEAD = 1024 * 1024


async def filedrop_error_handler(request: Request, exc: FileDropError) -> JSONResponse:
    """Render application errors as {"detail": message}."""
    if exc.status_code >= 500:
        logger.error(
            "%s on %s: %s", type(exc).__name__, request.url.path, exc.message, exc_info=exc
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        app_settings: Settings to use, defaults to the environment settings

    Returns:
        Configured FastAPI app
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info("Storing uploads in %s", app_settings.upload_dir.resolve())
        file_store_for(app)
        yield
        logger.info("Application shutdown complete")

    app = FastAPI(
        title="filedrop",
        description="Upload, list, download and delete files",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.file_store = None

    app.add_middleware(
        RequestSizeLimitMiddleware,
        max_bytes=app_settings.max_upload_files * app_settings.max_file_size + MULTIPART_OVERHEAD,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FileDropError, filedrop_error_handler)

    app.include_router(files.router, prefix="/api")

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    app.mount(
        "/uploads",
        StaticFiles(directory=app_settings.upload_dir, check_dir=False),
        name="uploads",
    )
    # Mounted last so it does not shadow the API
    app.mount(
        "/",
        StaticFiles(directory=app_settings.static_dir, html=True, check_dir=False),
        name="static",
    )

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    setup_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
