"""Configuration for company-membership."""

from .logging_config import LoggingConfig
from .settings import MembershipSettings, get_settings

__all__ = ["LoggingConfig", "MembershipSettings", "get_settings"]
