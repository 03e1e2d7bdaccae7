"""Fixture runner - run a program against numbered fixtures and diff its output."""

__version__ = "0.1.0"
