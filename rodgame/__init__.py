"""Game-logic core for a wave-based shooting gallery: pools, scenes, events, collisions, items, power-ups and enemy waves."""

__version__ = "0.1.0"