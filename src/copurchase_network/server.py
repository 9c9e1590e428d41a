from __future__ import annotations

import logging

import uvicorn

from .app import create_app
from .query_engine import NetworkQueryEngine
from .settings import settings
from .store import GraphStore

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    level = (level or settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def serve(host: str | None = None, port: int | None = None) -> None:
    # Load before building the app: a LoadError aborts startup.
    store = GraphStore.from_bundled()
    app = create_app(NetworkQueryEngine(store))

    config = uvicorn.Config(
        app,
        host=host if host is not None else settings.bind_host,
        port=port if port is not None else settings.bind_port,
        log_level=(settings.log_level or "info").lower(),
        loop="uvloop",
        http="httptools",
    )
    logger.info("Serving co-purchase network on %s:%s%s", config.host, config.port, settings.api_prefix)
    uvicorn.Server(config).run()


def main() -> None:
    configure_logging()
    serve()


if __name__ == "__main__":
    main()
