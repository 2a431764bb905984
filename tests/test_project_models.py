"""Test Project and outcome Pydantic models."""

import pytest
from pydantic import ValidationError

from showcase.models.project import DeleteOutcome, Project, SaveOutcome, UpdateResult


def test_project_accepts_wire_names():
    project = Project.model_validate(
        {
            "title": "Chess Engine",
            "description": "Bitboard move generator",
            "imgUrl": "https://img.example.com/chess.png",
            "techUsed": "Rust",
            "githubUrl": "https://github.com/example/chess",
            "liveDemoLink": "https://chess.example.com",
        }
    )
    assert project.img_url == "https://img.example.com/chess.png"
    assert project.tech_used == "Rust"
    assert project.id is None


def test_project_accepts_field_names():
    project = Project(title="Chess Engine", github_url="https://github.com/example/chess")
    dumped = project.model_dump(by_alias=True, exclude_none=True)
    assert dumped == {"title": "Chess Engine", "githubUrl": "https://github.com/example/chess"}


def test_project_fields_are_optional():
    assert Project().model_dump(exclude_none=True) == {}


def test_project_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        Project(title="Chess Engine", stars=5)


def test_save_outcome_failure_shape():
    outcome = SaveOutcome(success=False, error="connection lost")
    assert outcome.model_dump(by_alias=True, exclude_none=True) == {
        "success": False,
        "error": "connection lost",
    }


def test_update_result_rejects_negative_count():
    with pytest.raises(ValidationError):
        UpdateResult(affected_rows=-1)


def test_delete_outcome_success_shape():
    assert DeleteOutcome(success=True).model_dump(exclude_none=True) == {"success": True}
