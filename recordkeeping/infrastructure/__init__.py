"""Infrastructure layer: logging and in-memory repository implementations."""
