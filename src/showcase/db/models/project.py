"""Project table."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from showcase.db.base import Base


class ProjectRow(Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    tech_used: Mapped[str | None] = mapped_column(Text, nullable=True)
    github_rep_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    live_demo_link: Mapped[str | None] = mapped_column(Text, nullable=True)
