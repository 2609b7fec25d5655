"""Feature modules for company-membership."""
