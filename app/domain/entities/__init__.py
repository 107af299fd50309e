"""Domain entities exposed by the application."""

from .greeting import GREETING_ID, Greeting

__all__ = [
    "GREETING_ID",
    "Greeting",
]
