"""Simulation core for a spaceship management game: galaxy, ship, rooms, crew, air, navigation and communications."""

__version__ = "0.1.0"