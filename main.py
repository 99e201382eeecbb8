import logging

import uvicorn
from fastapi import FastAPI

from config.settings import APP_NAME, APP_VERSION, HOST, LOG_LEVEL, PORT
from errors import register_exception_handlers
from middleware.cors_middleware import CorsHeadersMiddleware
from middleware.metrics_middleware import MetricsMiddleware
from routes.health import health_router
from routes.password_validation import password_validation_router

logger = logging.getLogger(__name__)
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(levelname)s - %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(title=APP_NAME, version=APP_VERSION)

    # Last added runs first: CORS wraps metrics
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(CorsHeadersMiddleware)

    register_exception_handlers(app)

    app.include_router(password_validation_router)
    app.include_router(health_router)

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Starting %s on %s:%d", APP_NAME, HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)
