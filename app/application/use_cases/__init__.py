"""Aggregate application use cases."""

from .create_greeting import DEFAULT_NAME, create_greeting

__all__ = [
    "DEFAULT_NAME",
    "create_greeting",
]
