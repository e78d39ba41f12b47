"""Domain modules."""
