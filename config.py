import os
from pathlib import Path
from swagger_ui_bundle import swagger_ui_path

BASE_DIR = Path(__file__).resolve().parent
UI_DIR = BASE_DIR / "ui"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE")

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

# Custom page and its scripts ship inside the ui package
CUSTOM_ASSETS_DIR = Path(os.getenv("CUSTOM_ASSETS_DIR", UI_DIR / "static" / "custom"))
# Swagger UI dist files come from the swagger-ui-bundle distribution
SWAGGER_UI_ASSETS_DIR = Path(os.getenv("SWAGGER_UI_ASSETS_DIR", swagger_ui_path))
TEMPLATES_DIR = UI_DIR / "templates"

MANAGEMENT_BASE_PATH = "/" + (os.getenv("MANAGEMENT_BASE_PATH", "").strip("/") or "actuator")
MANAGEMENT_EXPOSED_ENDPOINTS = [
    endpoint_id.strip()
    for endpoint_id in os.getenv("MANAGEMENT_EXPOSED_ENDPOINTS", "*").split(",")
    if endpoint_id.strip()
]

RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "false").lower() in ("1", "true", "yes")
RATE_LIMIT_DEFAULT = os.getenv("RATE_LIMIT_DEFAULT", "100/minute")
