"""A tiny arcade of Stacker and Snake on a simple state-driven pygame loop."""

__version__ = "0.1.0"