from .repository import EntityNotFoundError, Repository

__all__ = ["EntityNotFoundError", "Repository"]
