"""Domain layer for notification models."""
