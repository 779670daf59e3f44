"""Version information for sheet-export."""

__version__ = "1.0.0"
