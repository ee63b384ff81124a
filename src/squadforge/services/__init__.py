# src/squadforge/services/__init__.py

"""Business logic for the player resource."""

# Fewest players a listing or a team division may be built from.
MINIMUM_POPULATION = 10
