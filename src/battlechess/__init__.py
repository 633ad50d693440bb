"""Battle chess — a 5x12 chess variant rules engine."""

__version__ = "0.1.0"
