"""Application layer - example catalogue, demo scenarios and services."""
