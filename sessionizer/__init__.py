"""Sessionizer: fuzzy-pick a project directory and open a multiplexer session in it."""

__version__ = '0.1.0'
