from fastapi import FastAPI

from .admin import router as admin_router
from .auth import router as auth_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .payments import router as payments_router
from .profiles import router as profiles_router
from .properties import router as properties_router
from .reservations import router as reservations_router
from .reviews import router as reviews_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(profiles_router)
    app.include_router(properties_router)
    app.include_router(reservations_router)
    app.include_router(payments_router)
    app.include_router(reviews_router)
    app.include_router(notifications_router)
    app.include_router(messages_router)
    app.include_router(admin_router)
