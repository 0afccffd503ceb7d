import asyncio
import logging
import sys

import uvicorn
from fastapi import FastAPI

from .api.server import get_app as get_api_app
from .config import API_PORT, get_settings
from .web.server import get_app as get_web_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_log = logging.getLogger(__name__)


def _server(app: FastAPI, port: int, label: str) -> uvicorn.Server:
    settings = get_settings()
    _log.info("%s available at http://%s:%d", label, settings.host, port)
    config = uvicorn.Config(app, host=settings.host, port=port, log_level=settings.log_level)
    return uvicorn.Server(config=config)


def _api_server() -> uvicorn.Server:
    return _server(get_api_app(), API_PORT, "API")


def _web_server() -> uvicorn.Server:
    return _server(get_web_app(), get_settings().web_port, "Landing page")


async def _serve(*servers: uvicorn.Server) -> None:
    await asyncio.gather(*(server.serve() for server in servers))


def _run(*servers: uvicorn.Server) -> None:
    try:
        asyncio.run(_serve(*servers))
    except KeyboardInterrupt:
        sys.exit(0)


def main_api() -> None:  # noqa: D401
    """Serve the API stub (``turismo-api``)."""

    _run(_api_server())


def main_web() -> None:  # noqa: D401
    """Serve the landing page (``turismo-web``)."""

    _run(_web_server())


def main() -> None:  # noqa: D401
    """Serve both applications from one process (``turismo``)."""

    _run(_api_server(), _web_server())
