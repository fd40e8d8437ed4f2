"""Object-Oriented Design Notes - Root Package.

This package collects small, runnable illustrations of object-oriented design:
class relationships, the SOLID principles and a catalogue of classic design
patterns. Every example is independent of the others; what they share is a
pluggable-behavior object model in which a subject delegates part of its
behavior to replaceable collaborators.

Key Components:
    - domain: Pluggable-behavior core and the examples themselves
    - application: Example catalogue, demo scenarios and services
    - infrastructure: Logging and registries
    - config: Typed configuration schemas and management
    - cli: Command-line interface

Architecture:
    The layering mirrors Clean Architecture: the domain layer knows nothing
    about configuration files, logging setup or the CLI. Concrete collaborators
    are chosen in one composition root (bootstrap.create_application).
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "OOD Notes Contributors"
__package_name__ = PACKAGE_NAME

"""
Usage:
    >>> oodnotes list --category patterns
    >>> oodnotes run strategy
    >>> oodnotes --format yaml show memento
"""
