"""
Builds the API description document and the Swagger UI configuration.

Both the plain HTTP routes and the management endpoints serve these
documents, so everything they return goes through ``dump_document``.
"""
from typing import Any, Union

from fastapi.encoders import jsonable_encoder
from fastapi.openapi.models import (
    Contact,
    Info,
    License,
    MediaType,
    OpenAPI,
    Operation,
    PathItem,
    Response,
    Schema,
    Server,
)

from api.models import UiConfig

OPENAPI_VERSION = "3.0.1"
API_TITLE = "Spring Boot Admin API"
API_VERSION = "1.0.0"
OPENAPI_URL = "/api/openapi.json"
UI_DESCRIPTION = "Custom Swagger UI for Spring Boot Admin"

# (path, summary, description, 200 response description, example body)
EXAMPLE_PATHS = (
    (
        "/api/health",
        "Health Check",
        "Returns the health status of the application",
        "Application is healthy",
        '{"status":"UP"}',
    ),
    (
        "/api/status",
        "Application Status",
        "Returns detailed status information about the application",
        "Status information retrieved successfully",
        '{"status":"UP","uptime":"2h 30m"}',
    ),
    (
        "/api/swagger-ui-config",
        "Swagger UI Configuration",
        "Returns configuration for the Swagger UI",
        "Configuration retrieved successfully",
        '{"url":"/api/openapi.json","title":"Spring Boot Admin API"}',
    ),
)


def _example_path_item(
    summary: str, description: str, response_description: str, example: str
) -> PathItem:
    operation = Operation(
        summary=summary,
        description=description,
        responses={
            "200": Response(
                description=response_description,
                content={
                    "application/json": MediaType(
                        schema=Schema(type="string", example=example)
                    )
                },
            )
        },
    )
    return PathItem(summary=summary, description=description, get=operation)


def describe_api() -> OpenAPI:
    """
    Build the OpenAPI document for the admin server.

    The paths are fixed examples, not the routes registered on the app.
    """
    info = Info(
        title=API_TITLE,
        description="API documentation for Spring Boot Admin with custom Swagger UI",
        version=API_VERSION,
        contact=Contact(name="Spring Boot Admin Team", email="admin@example.com"),
        license=License(name="MIT License", url="https://opensource.org/licenses/MIT"),
    )
    servers = [
        Server(url="http://localhost:8080", description="Development server"),
        Server(url="https://api.example.com", description="Production server"),
    ]
    paths = {
        path: _example_path_item(summary, description, response_description, example)
        for path, summary, description, response_description, example in EXAMPLE_PATHS
    }
    return OpenAPI(openapi=OPENAPI_VERSION, info=info, servers=servers, paths=paths)


def describe_ui_config() -> UiConfig:
    return UiConfig(url=OPENAPI_URL, title=API_TITLE, description=UI_DESCRIPTION)


def dump_document(document: Union[OpenAPI, UiConfig]) -> Any:
    """Serialize a document to plain JSON data, dropping unset fields."""
    return jsonable_encoder(document, by_alias=True, exclude_none=True)
