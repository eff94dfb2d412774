"""Domain layer: structure models."""
