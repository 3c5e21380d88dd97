"""Utility packages for arbor."""
