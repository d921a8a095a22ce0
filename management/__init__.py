from . import documentation, health  # noqa: F401  (register endpoints)
from .endpoints import build_router, endpoint, register_endpoint, registered_endpoints

__all__ = ["build_router", "endpoint", "register_endpoint", "registered_endpoints"]
