"""Core utilities shared across compdoc modules."""
