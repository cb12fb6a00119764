from fastapi import APIRouter

from app.api.folders import router as folders_router

api_router = APIRouter()

api_router.include_router(folders_router, prefix="/folders", tags=["folders"])
