"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .recordings import router as recordings_router
from .root import router as root_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(recordings_router, prefix="/api/recordings", tags=["recordings"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])
