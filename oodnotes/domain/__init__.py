"""Domain layer - pluggable-behavior core and the design examples built on it."""
