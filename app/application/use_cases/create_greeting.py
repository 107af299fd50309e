"""Use cases for producing greeting messages."""

from app.domain.entities.greeting import GREETING_ID, Greeting


DEFAULT_NAME = "World"


def create_greeting(name: str | None = None) -> Greeting:
    """Return a greeting for the provided name.

    When no name is provided, ``DEFAULT_NAME`` is greeted instead. An empty
    string is a provided name and is used as is.
    """

    if name is None:
        name = DEFAULT_NAME

    return Greeting(id=GREETING_ID, content=f"Hello {name}!")


__all__ = ["DEFAULT_NAME", "create_greeting"]
