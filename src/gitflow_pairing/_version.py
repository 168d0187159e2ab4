"""Version information for gitflow-pairing."""

__version__ = "0.1.0"
