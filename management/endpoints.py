"""
Actuator-style management endpoints.

Each endpoint is a read operation registered under an id. The admin server
discovers what an instance offers from the ``_links`` index served at the
management base path, then calls ``{base}/{id}`` to read the payload.
"""
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse
from typing import Any, Callable, Dict, List
import logging

logger = logging.getLogger(__name__)

ReadOperation = Callable[[], Any]

_registry: Dict[str, ReadOperation] = {}


def register_endpoint(endpoint_id: str, read_operation: ReadOperation) -> None:
    if endpoint_id in _registry:
        raise ValueError(f"Management endpoint '{endpoint_id}' is already registered")
    _registry[endpoint_id] = read_operation
    logger.debug(f"Registered management endpoint: {endpoint_id}")


def endpoint(endpoint_id: str) -> Callable[[ReadOperation], ReadOperation]:
    """Decorator registering a function as the read operation of an endpoint."""

    def decorator(func: ReadOperation) -> ReadOperation:
        register_endpoint(endpoint_id, func)
        return func

    return decorator


def registered_endpoints() -> List[str]:
    return list(_registry)


def build_router(base_path: str, exposed: List[str]) -> APIRouter:
    """
    Create the router serving the discovery index and every exposed endpoint.
    ``exposed`` holds endpoint ids, or ``"*"`` for all of them.
    """
    router = APIRouter(prefix=base_path)

    def is_exposed(endpoint_id: str) -> bool:
        return "*" in exposed or endpoint_id in exposed

    @router.get("", include_in_schema=False)
    async def links(request: Request):
        base_url = str(request.base_url).rstrip("/") + base_path
        index = {"self": {"href": base_url, "templated": False}}
        for endpoint_id in _registry:
            if is_exposed(endpoint_id):
                index[endpoint_id] = {"href": f"{base_url}/{endpoint_id}", "templated": False}
        return JSONResponse({"_links": index})

    @router.get("/{endpoint_id}", include_in_schema=False)
    async def read(endpoint_id: str):
        read_operation = _registry.get(endpoint_id)
        if read_operation is None or not is_exposed(endpoint_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Management endpoint '{endpoint_id}' not found",
            )
        return JSONResponse(read_operation())

    return router
