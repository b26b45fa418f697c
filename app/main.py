import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import generate, health
from app.api.errors import register_error_handlers
from app.config.settings import Settings
from app.database.connection import close_pool, init_pool
from app.logging.logger import Log
from app.processor.processor import Processor, build_processor


def create_app(settings: Settings | None = None, processor: Processor | None = None) -> FastAPI:
    """Build the API: logging -> pool -> processor on startup, pool closed on shutdown."""
    settings = settings or Settings()
    Log.configure(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.tracking_enabled:
            try:
                init_pool(settings)
            except Exception as exc:
                Log.warning(f"Tracking disabled, database pool failed to open: {exc}")
        else:
            Log.info("Tracking disabled: DB_HOST not set")
        if app.state.processor is None:
            app.state.processor = build_processor(settings)
        Log.info(f"ResumeToSite API ready (env={settings.app_env})")
        try:
            yield
        finally:
            close_pool()

    app = FastAPI(title="ResumeToSite API", lifespan=lifespan)
    app.state.settings = settings
    app.state.processor = processor
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(generate.router)
    return app


def main() -> None:
    """Entry point: load settings and serve the API with uvicorn."""
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
