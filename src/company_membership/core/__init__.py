"""Core shared types: exceptions and identifier value objects."""
