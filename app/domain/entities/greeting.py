"""Domain entity representing a greeting."""

from dataclasses import dataclass

GREETING_ID = 1


@dataclass(frozen=True)
class Greeting:
    """Represents the message returned by the greeting endpoint."""

    id: int
    content: str


__all__ = ["GREETING_ID", "Greeting"]
