"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from hikingbuddy.api.routes import auth, users, hikes, entries

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(hikes.router)
api_router.include_router(entries.router)
