"""company-membership: multi-tenant company membership and access control."""

from .__version__ import __version__

__all__ = ["__version__"]
