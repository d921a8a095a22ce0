# ui/assets.py
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from pathlib import Path
from typing import NamedTuple, Optional
import config
import logging

logger = logging.getLogger(__name__)


class ResourceHandler(NamedTuple):
    path: str
    directory: Path
    name: str


RESOURCE_HANDLERS = (
    # Custom documentation page and its assets
    ResourceHandler("/custom", config.CUSTOM_ASSETS_DIR, "custom"),
    # Swagger UI library assets
    ResourceHandler("/swagger-ui", config.SWAGGER_UI_ASSETS_DIR, "swagger-ui"),
)


def register_resource_handlers(app: FastAPI, handlers=RESOURCE_HANDLERS):
    """
    Mount a static file app for every resource handler.
    Must run after the routers are included so explicit routes take precedence.
    """
    for handler in handlers:
        logger.info(f"Serving {handler.path}/** from {handler.directory}")
        app.mount(handler.path, StaticFiles(directory=handler.directory), name=handler.name)


def resolve_asset(url_path: str, handlers=RESOURCE_HANDLERS) -> Optional[Path]:
    """
    Map a URL path to the file a resource handler would serve for it.
    Returns None when no handler matches or the file does not exist.
    """
    for handler in handlers:
        prefix = handler.path + "/"
        if not url_path.startswith(prefix):
            continue
        directory = Path(handler.directory).resolve()
        candidate = (directory / url_path[len(prefix):]).resolve()
        if directory in candidate.parents and candidate.is_file():
            return candidate
    return None
