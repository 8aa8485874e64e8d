import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from journal.config import get_settings
from journal.infrastructure.database import engine, initialize_database
from journal.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Journal", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
