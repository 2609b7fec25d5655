"""Version information for company-membership."""

__version__ = "0.1.0"
