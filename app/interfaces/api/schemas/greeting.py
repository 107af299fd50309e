"""Schemas for the greeting endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class GreetingRead(BaseModel):
    id: int = Field(..., description="Identificador del saludo, siempre 1")
    content: str = Field(..., description="Texto del saludo")

    model_config = ConfigDict(from_attributes=True)


__all__ = ["GreetingRead"]
