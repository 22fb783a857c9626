"""Favorites domain components.

:class:`FavoritesPersistence` owns the SQLAlchemy queries; the service module
one level up coordinates it with logging and schema conversion.
"""

from .persistence import FavoritesPersistence

__all__ = ["FavoritesPersistence"]
