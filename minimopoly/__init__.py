"""A two-player terminal property-trading board game with saved games."""

__version__ = "1.0.0"
__all__ = ["__version__"]