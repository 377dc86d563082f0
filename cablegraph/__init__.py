"""cablegraph: deterministic cable-connection extraction from wiring-diagram text."""

__version__ = "0.1.0"
