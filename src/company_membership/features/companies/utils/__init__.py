"""Company SQL query constants."""
