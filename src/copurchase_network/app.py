from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import build_network_router
from .query_engine import NetworkQueryEngine
from .settings import NetworkServiceSettings, settings as default_settings

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


def create_app(engine: NetworkQueryEngine, cfg: NetworkServiceSettings | None = None) -> FastAPI:
    """Build the HTTP app around an already-loaded engine."""
    cfg = cfg or default_settings
    app = FastAPI(title="Product Co-Purchase Network", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_allowed_origins,
        allow_methods=CORS_METHODS,
        allow_headers=["*"],
        allow_credentials=True,
        max_age=cfg.cors_max_age,
    )
    app.include_router(build_network_router(engine, prefix=cfg.api_prefix))
    return app
