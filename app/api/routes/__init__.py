"""
API router aggregating all route modules.
"""

from fastapi import APIRouter

from app.api.routes import health, auth, sessions, my_sessions

router = APIRouter()

# Include all route modules
router.include_router(health.router, prefix="/health", tags=["Health"])
router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(sessions.router, prefix="/sessions", tags=["Catalog"])
router.include_router(my_sessions.router, prefix="/my-sessions", tags=["My Sessions"])
