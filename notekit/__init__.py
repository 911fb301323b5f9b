"""Structured models for notification payloads.

The package re-exports nothing; import the entities from
``notekit.domain.entities`` and the helpers from their own modules.
"""
