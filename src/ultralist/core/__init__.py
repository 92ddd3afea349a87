"""Core wiring: ports and application state."""
