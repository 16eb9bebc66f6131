"""A small modal terminal text editor with vi-style keys."""

__version__ = "0.1.0"