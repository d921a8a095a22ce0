from fastapi import APIRouter
from .openapi import router as openapi_router

router = APIRouter()
router.include_router(openapi_router)
