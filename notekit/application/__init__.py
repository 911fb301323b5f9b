"""Application layer helpers built on top of the domain entities."""
