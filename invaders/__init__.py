"""Game logic for a side-scrolling run-and-gun shooter: geometry, collisions,
animations, enemies, level layouts, camera, combat rules and high scores."""

__version__ = "0.1.0"