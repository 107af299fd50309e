from fastapi import FastAPI

from .greeting import router as greeting_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(greeting_router)
