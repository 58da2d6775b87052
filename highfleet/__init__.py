"""Data types for Highfleet game data: escadra strings, linked list nodes and ammo records."""

__version__ = "0.1.0"
__all__ = ["escadra_string", "tll", "ammo_v1_151", "ammo_v1_163"]