"""Core layer: configuration, result types, errors and the container."""
