"""ASGI entry points."""
