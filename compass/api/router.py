from fastapi import APIRouter

from compass.api.v1 import tools

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(tools.router)
