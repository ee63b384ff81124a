# src/squadforge/api/__init__.py

"""HTTP routers."""
