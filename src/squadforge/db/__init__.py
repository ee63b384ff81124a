# src/squadforge/db/__init__.py

"""Database models, session and player store."""
