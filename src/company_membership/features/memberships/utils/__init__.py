"""SQL query constants for memberships."""
