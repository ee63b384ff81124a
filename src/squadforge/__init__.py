# src/squadforge/__init__.py

"""SquadForge: football player management API."""

__version__ = "1.0.0"
