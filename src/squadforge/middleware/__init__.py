# src/squadforge/middleware/__init__.py

"""Middleware components for the SquadForge API."""

from .logging import REQUEST_ID_HEADER, RequestLoggingMiddleware

__all__ = ["REQUEST_ID_HEADER", "RequestLoggingMiddleware"]
