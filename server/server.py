#!/usr/bin/env python3
"""
Travel Place Recommendation Server: entrypoint for python -m server.server.

For uvicorn server:app use server/__init__.py (exposes app from server.app).
Logging is configured from LOG_LEVEL by create_app.
"""

from .app import app
from .config import get_config

if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port)
