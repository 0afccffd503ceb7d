import importlib
import logging
import pkgutil
from types import ModuleType

from fastapi import APIRouter, FastAPI

_log = logging.getLogger(__name__)


def register_routes(app: FastAPI, package: ModuleType) -> None:  # noqa: D401
    """Automatically discover and attach all route files in *package*.

    Each module that exposes a top-level ``router`` variable (an instance of
    ``fastapi.APIRouter``) will be imported and registered. Modules whose
    name starts with an underscore are treated as private helpers.
    """

    for mod_info in pkgutil.iter_modules(package.__path__):
        mod_name = mod_info.name

        if mod_name.startswith("_"):
            continue

        try:
            module = importlib.import_module(f"{package.__name__}.{mod_name}")
        except Exception:
            _log.exception("Failed to load module %s", mod_name)
            continue

        router = getattr(module, "router", None)
        if isinstance(router, APIRouter):
            app.include_router(router)
            _log.info("Registered router from %s", mod_name)
        else:
            _log.debug("No router found in %s", mod_name)
