"""Loss-aware grid routing for photonic integrated circuits: parser, router, writers and test generator."""

__version__ = "0.1.0"