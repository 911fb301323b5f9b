"""Use cases operating on parsed notifications."""
