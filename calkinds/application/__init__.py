"""Application layer: configuration and the property typing service."""
