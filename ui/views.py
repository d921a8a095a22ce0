# ui/views.py
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse, RedirectResponse
from .assets import resolve_asset
import logging

logger = logging.getLogger(__name__)

SWAGGER_UI_PAGE = "/custom/swagger-ui-page.html"

# Served in the same request, without a client round trip
VIEW_FORWARDS = {
    "/swagger-ui-custom": SWAGGER_UI_PAGE,
    "/swagger-ui/custom": SWAGGER_UI_PAGE,
}

VIEW_REDIRECTS = {
    "/swagger-ui/": "/swagger-ui/custom",
}


def forward(target: str) -> FileResponse:
    asset = resolve_asset(target)
    if asset is None:
        logger.warning(f"Forward target not found: {target}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FileResponse(asset)


def _forward_view(target: str):
    async def view():
        return forward(target)

    return view


def _redirect_view(location: str):
    async def view():
        return RedirectResponse(url=location, status_code=status.HTTP_302_FOUND)

    return view


def build_router(forwards=VIEW_FORWARDS, redirects=VIEW_REDIRECTS) -> APIRouter:
    router = APIRouter()
    for path, target in forwards.items():
        router.add_api_route(path, _forward_view(target), methods=["GET", "HEAD"], include_in_schema=False)
        logger.debug(f"View {path} forwards to {target}")
    for path, location in redirects.items():
        router.add_api_route(path, _redirect_view(location), methods=["GET", "HEAD"], include_in_schema=False)
        logger.debug(f"View {path} redirects to {location}")
    return router


router = build_router()
