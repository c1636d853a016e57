"""Core infrastructure: filesystem access, logging and settings."""
