from fastapi import APIRouter
from api.v1.routes.locales import router as locales_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(locales_router)
