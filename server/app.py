"""
Travel Place Recommendation API — FastAPI app factory.

Use: uvicorn server.app:app
Or:  from server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import configure_logging, get_config
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI app with logging, CORS, routes, and startup."""
    configure_logging(get_config().log_level)
    app = FastAPI(
        title="Travel Place Recommendation API",
        description="Trust-biased place recommendations for travel plans",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _startup():
        config = get_config()
        ok, errors = config.validate()
        for err in errors:
            logger.warning("[startup] config: %s", err)
        state = get_state()
        logger.info(
            "[startup] Travel Place Recommendation API ready (data_source=%s, valid_config=%s)",
            state.config.data_source, ok,
        )

    return app


app = create_app()
