from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from turismo.utils.assets import compile_scss
from turismo.utils.routing import register_routes

_WEB_DIR = Path(__file__).parent


def get_app() -> FastAPI:  # noqa: D401
    """Return the landing page application."""

    app = FastAPI(
        title="turismo.rs",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    static_path = _WEB_DIR / "static"
    templates_path = _WEB_DIR / "templates"

    # Compile SCSS to CSS once at startup
    compile_scss(static_path / "scss" / "turismo.scss", static_path / "css" / "turismo.css")

    app.mount("/static", StaticFiles(directory=static_path), name="static")

    # ------------------------------------------------------------------
    # Routes live in dedicated modules under ``turismo.web.routes``. The
    # template environment is exposed via the application state so the
    # routers can reach it without creating import cycles.
    # ------------------------------------------------------------------
    app.state.templates = Jinja2Templates(directory=str(templates_path))

    from . import routes

    register_routes(app, routes)

    return app
