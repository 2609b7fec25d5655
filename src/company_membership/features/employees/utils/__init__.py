"""SQL query constants for employee records."""
