"""Game logic for a gravity-flipping arcade game: menus, settings, controls, animation and statistics."""

__version__ = "0.1.0"