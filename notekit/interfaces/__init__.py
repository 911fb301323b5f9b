"""Interfaces exposed to the presentation layer."""
