from fastapi import APIRouter

from src.api.health.router import router as health_router
from src.api.menu.router import router as menu_router
from src.api.session.router import router as session_router
from src.api.sidebar.router import router as sidebar_router
from src.api.user.router import router as user_router

# V1 API router
v1_router = APIRouter(prefix="/v1")

# Include domain routers
v1_router.include_router(menu_router)
v1_router.include_router(session_router)
v1_router.include_router(sidebar_router)
v1_router.include_router(user_router)

# Main API router
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(v1_router)
