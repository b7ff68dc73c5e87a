"""Adapters between the import pipeline and the outside world."""
