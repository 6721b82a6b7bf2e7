from fastapi.routing import APIRouter

from urshort.web.api import monitoring, redirect

api_router = APIRouter()
api_router.include_router(monitoring.router)
# ========== Redirects ==========
api_router.include_router(redirect.router)    # GET / and GET /{parameter}
