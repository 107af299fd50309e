"""Ruta que devuelve un saludo personalizado."""

import logging

from fastapi import APIRouter, Query

from app.application.use_cases.create_greeting import DEFAULT_NAME, create_greeting
from app.interfaces.api.schemas import GreetingRead

logger = logging.getLogger(__name__)

router = APIRouter(tags=["greeting"])


async def read_greeting(
    name: str = Query(DEFAULT_NAME, description="Nombre a saludar"),
) -> GreetingRead:
    """Devuelve un saludo para ``name`` o para ``World`` si no se envía.

    Si ``name`` se repite en la query, se usa el último valor.
    """

    greeting = create_greeting(name)
    logger.debug("Greeting generated: %s", greeting.content)
    return GreetingRead.model_validate(greeting)


router.add_api_route(
    "/greeting",
    read_greeting,
    methods=["GET"],
    response_model=GreetingRead,
)


__all__ = ["router", "read_greeting"]
