from fastapi import FastAPI

from turismo.utils.routing import register_routes


def get_app() -> FastAPI:  # noqa: D401
    """Return the placeholder API application."""

    # No docs/openapi routes: ``GET /`` is the only thing this service answers.
    app = FastAPI(
        title="turismo.rs API",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    from . import routes

    register_routes(app, routes)

    return app
