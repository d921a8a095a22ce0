from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException
from api import router as api_router
from ui import router as ui_router
from ui.assets import register_resource_handlers
from ui.utils import render_template
import config
import logging
import management


# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    filename=config.LOG_FILE,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

JSON_PREFIXES = ("/api", config.MANAGEMENT_BASE_PATH)


def wants_json(path: str) -> bool:
    return any(path == prefix or path.startswith(prefix + "/") for prefix in JSON_PREFIXES)


def create_app() -> FastAPI:
    app = FastAPI(title="Spring Boot Admin Swagger UI", docs_url=None, redoc_url=None, openapi_url=None)

    # Rate limiting, off unless RATE_LIMIT_ENABLED is set
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[config.RATE_LIMIT_DEFAULT],
        enabled=config.RATE_LIMIT_ENABLED,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    if config.CORS_ORIGINS == ["*"]:
        logger.warning(
            "CORS is set to allow all origins (*). "
            "Set CORS_ORIGINS environment variable to restrict origins in production."
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
        max_age=600,
    )

    # Security headers middleware
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        # The admin UI embeds the documentation page
        response.headers["X-Frame-Options"] = "SAMEORIGIN"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        return response

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        if wants_json(request.url.path):
            return JSONResponse({"detail": exc.detail}, status_code=exc.status_code)
        context = {"error": exc.detail, "status_code": exc.status_code}
        return render_template(request, "error.html", context, status_code=exc.status_code)

    app.include_router(api_router, prefix="/api")
    app.include_router(
        management.build_router(config.MANAGEMENT_BASE_PATH, config.MANAGEMENT_EXPOSED_ENDPOINTS)
    )
    app.include_router(ui_router)
    # Static mounts go last so the view routes under /swagger-ui win
    register_resource_handlers(app)

    logger.info(
        f"Management endpoints {management.registered_endpoints()} "
        f"under {config.MANAGEMENT_BASE_PATH}"
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    import os

    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", 8080)))
