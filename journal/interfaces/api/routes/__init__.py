from fastapi import FastAPI

from .activities import router as activities_router
from .contacts import router as contacts_router
from .events import router as events_router
from .projects import router as projects_router
from .summaries import router as summaries_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(projects_router)
    app.include_router(activities_router)
    app.include_router(contacts_router)
    app.include_router(events_router)
    app.include_router(summaries_router)
