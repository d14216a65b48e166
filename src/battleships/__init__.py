"""Battleships: a console game of one human against a pluggable AI."""

__version__ = "0.1.0"
