"""Offline unit tests for the UI framework (no browser, no network)."""
