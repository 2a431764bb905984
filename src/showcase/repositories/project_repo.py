"""Project repository.

Error policy differs per operation: ``save_project`` and ``get_projects`` log
store failures and report them in-band (a failed SaveOutcome, an empty list),
while ``update_project`` and ``delete_project`` log and re-raise them.
"""

import logging

from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError

from showcase.db.engine import ConnectionManager
from showcase.db.models.project import ProjectRow
from showcase.errors.exceptions import ShowcaseError
from showcase.models.project import DeleteOutcome, Project, SaveOutcome, UpdateResult
from showcase.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = "Projekt nicht gefunden."


def _column_values(project: Project) -> dict:
    return {
        "title": project.title,
        "description": project.description,
        "image_url": project.img_url,
        "tech_used": project.tech_used,
        "github_rep_link": project.github_url,
        "live_demo_link": project.live_demo_link,
    }


def _to_project(row: Row) -> Project:
    return Project(
        id=row.id,
        title=row.title,
        description=row.description,
        img_url=row.image_url,
        tech_used=row.tech_used,
        github_url=row.github_rep_link,
        live_demo_link=row.live_demo_link,
    )


class ProjectRepository(BaseRepository):
    def __init__(self, manager: ConnectionManager):
        super().__init__(manager, ProjectRow)

    async def save_project(self, project: Project) -> SaveOutcome:
        logger.info("Saving project: %s", project.model_dump(exclude={"id"}))
        try:
            project_id = await self.insert(**_column_values(project))
        except (SQLAlchemyError, ShowcaseError) as exc:
            logger.error("Failed to save project: %s", exc)
            return SaveOutcome(success=False, error=str(exc))

        logger.info("Project saved (id=%s)", project_id)
        return SaveOutcome(success=True, insert_id=project_id)

    async def get_projects(self, search_term: str) -> list[Project]:
        """Return projects whose title contains ``search_term``.

        An empty term matches every row. A failed lookup is logged and
        returns an empty list, same as no match.
        """
        try:
            rows = await self.list_where(
                ProjectRow.title.contains(search_term, autoescape=True)
            )
        except ShowcaseError as exc:
            logger.error("No usable database connection: %s", exc)
            return []
        except SQLAlchemyError as exc:
            logger.error("Project search failed: %s", exc)
            return []
        return [_to_project(row) for row in rows]

    async def update_project(self, project_id: int, project: Project) -> UpdateResult:
        """Replace all six fields of a project.

        An unknown id is not an error: the result reports zero affected rows.
        """
        try:
            affected = await self.update_by_id(project_id, **_column_values(project))
        except (SQLAlchemyError, ShowcaseError) as exc:
            logger.error("Failed to update project %s: %s", project_id, exc)
            raise
        return UpdateResult(affected_rows=affected)

    async def delete_project(self, project_id: int) -> DeleteOutcome:
        try:
            affected = await self.delete_by_id(project_id)
        except (SQLAlchemyError, ShowcaseError) as exc:
            logger.error("Failed to delete project %s: %s", project_id, exc)
            raise

        if affected > 0:
            logger.info("Project %s deleted", project_id)
            return DeleteOutcome(success=True)
        logger.info("No project with id %s found", project_id)
        return DeleteOutcome(success=False, message=PROJECT_NOT_FOUND)
