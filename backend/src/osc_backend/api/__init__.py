"""API layer: routers, request models, services and the app factory."""

from osc_backend.api.app import create_api

__all__ = ["create_api"]
