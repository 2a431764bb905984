"""CLI entry point for the showcase project store."""

import argparse
import asyncio
import json
import logging

from sqlalchemy.exc import SQLAlchemyError

from showcase.config import Settings, settings as default_settings
from showcase.errors.exceptions import ShowcaseError
from showcase.logging_config import (
    bind_operation_context,
    clear_operation_context,
    configure_logging,
)
from showcase.models.project import Project
from showcase.startup import open_store

logger = logging.getLogger(__name__)


def _add_field_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--title")
    parser.add_argument("--description")
    parser.add_argument("--img-url")
    parser.add_argument("--tech-used", help="Free-form list of technologies")
    parser.add_argument("--github-url")
    parser.add_argument("--live-demo-link")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="showcase",
        description="Manage portfolio projects in the showcase store",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (default: info)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Save a new project")
    _add_field_arguments(add)

    search = sub.add_parser("search", help="List projects whose title contains TERM")
    search.add_argument("term", nargs="?", default="")

    update = sub.add_parser("update", help="Replace all fields of a project")
    update.add_argument("project_id", type=int)
    _add_field_arguments(update)

    delete = sub.add_parser("delete", help="Delete a project")
    delete.add_argument("project_id", type=int)

    return parser


def _project_from_args(args: argparse.Namespace) -> Project:
    return Project(
        title=args.title,
        description=args.description,
        img_url=args.img_url,
        tech_used=args.tech_used,
        github_url=args.github_url,
        live_demo_link=args.live_demo_link,
    )


async def run(args: argparse.Namespace, settings: Settings | None = None):
    """Execute one command and return its JSON-serializable result."""
    repo = await open_store(settings)
    bind_operation_context(args.command, getattr(args, "project_id", None))
    try:
        if args.command == "add":
            outcome = await repo.save_project(_project_from_args(args))
        elif args.command == "search":
            projects = await repo.get_projects(args.term)
            return [p.model_dump(by_alias=True) for p in projects]
        elif args.command == "update":
            outcome = await repo.update_project(args.project_id, _project_from_args(args))
        else:
            outcome = await repo.delete_project(args.project_id)
        return outcome.model_dump(by_alias=True, exclude_none=True)
    finally:
        clear_operation_context()
        await repo.manager.dispose()


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(
        log_level=args.log_level or default_settings.log_level,
        json_output=args.json_logs or default_settings.log_json,
    )

    try:
        result = asyncio.run(run(args))
    except (SQLAlchemyError, ShowcaseError) as exc:
        logger.error("Command %s failed: %s", args.command, exc)
        raise SystemExit(1) from exc

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
