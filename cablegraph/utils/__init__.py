"""Utility helpers (configuration)."""
