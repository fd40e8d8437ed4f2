"""Catalogue of classic design patterns built on the pluggable-behavior model."""
