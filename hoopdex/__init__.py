"""Hoopdex: search NBA players and teams and keep a list of favorites."""

__version__ = "0.1.0"
