"""
Beatstage Discovery: FastAPI app factory.

Use: uvicorn discovery_server.app:app
Or:  from discovery_server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"


def configure_logging(level: str) -> None:
    """Configure the root logger once for the process."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    config = get_config()
    configure_logging(config.log_level)

    app = FastAPI(
        title="Beatstage Discovery API",
        description="Trending recordings and rising talent rankings",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _startup():
        ok, errors = config.validate()
        for error in errors:
            logger.warning("Config: %s", error)
        state = get_state()
        logger.info(
            "Beatstage Discovery API starting (data_source=%s, store=%s, config_ok=%s)",
            state.config.data_source, state.store_name, ok,
        )
        logger.info(
            "Trending window=%dd max=%d; rising window=%dd max=%d",
            state.trending_config.window_days, state.trending_config.max_results,
            state.rising_config.window_days, state.rising_config.max_results,
        )

    return app


app = create_app()
