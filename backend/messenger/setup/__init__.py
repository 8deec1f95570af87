"""Application wiring (dependency injection)."""
