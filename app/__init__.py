"""Greeting API application package."""
