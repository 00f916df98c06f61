import logging
import signal
from contextlib import asynccontextmanager
from typing import Optional, Sequence

import uvicorn
from fastapi import FastAPI

from students_api.api.v1.router import api_router
from students_api.core.config import Settings, load_settings
from students_api.core.exceptions import ConfigError, StorageError
from students_api.core.handlers import register_exception_handlers
from students_api.core.logging import setup_logging
from students_api.storage.base import Storage
from students_api.storage.sqlite import SqliteStorage

PROJECT_NAME = "Students API"
APP_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


class Server(uvicorn.Server):
    """uvicorn server whose run() returns after SIGINT/SIGTERM instead of re-raising the signal."""

    def handle_exit(self, sig, frame):
        logger.info(f"shutdown signal received: {signal.Signals(sig).name}")
        super().handle_exit(sig, frame)
        self._captured_signals.clear()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"server started, address={app.state.settings.http_server.addr}")
    try:
        yield
    finally:
        logger.info("shutting down the server")
        app.state.storage.close()


def create_app(settings: Settings, storage: Storage) -> FastAPI:
    app = FastAPI(
        title=PROJECT_NAME,
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix="/api")
    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = load_settings(argv)
    except ConfigError as e:
        setup_logging()
        logger.critical(str(e))
        return 1

    setup_logging(settings.env)

    try:
        storage = SqliteStorage(settings.storage_path)
    except StorageError as e:
        logger.critical(str(e))
        return 1
    logger.info(f"storage initialized, env={settings.env}, version={APP_VERSION}")

    app = create_app(settings, storage)
    server = Server(
        uvicorn.Config(
            app,
            host=settings.http_server.host,
            port=settings.http_server.port,
            # In-flight requests still running after this are cancelled
            timeout_graceful_shutdown=settings.http_server.shutdown_timeout,
            log_config=None,
        )
    )

    # uvicorn stops accepting connections on SIGINT/SIGTERM
    try:
        server.run()
    except Exception as e:
        logger.error(f"failed to shutdown: {e}")
        return 1

    logger.info("server shutdown successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
