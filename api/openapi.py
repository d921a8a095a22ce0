from fastapi import APIRouter
from fastapi.responses import JSONResponse
from api.services.document_service import describe_api, describe_ui_config, dump_document

router = APIRouter()


@router.get("/openapi.json", include_in_schema=False)
async def openapi_json():
    """OpenAPI document for the admin server"""
    return JSONResponse(dump_document(describe_api()))


@router.get("/swagger-ui-config", include_in_schema=False)
async def swagger_ui_config():
    """Settings read by the custom Swagger UI page"""
    return JSONResponse(dump_document(describe_ui_config()))
