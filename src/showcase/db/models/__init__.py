"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from showcase.db.models.project import ProjectRow

__all__ = ["ProjectRow"]
