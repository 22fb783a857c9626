from .models import Base, Favorite

__all__ = ["Base", "Favorite"]
