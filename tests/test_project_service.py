from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from taskboard.core.status_codes import ErrorCode
from taskboard.models import Project, Task
from taskboard.schemas.project import ProjectCreate
from taskboard.services import ProjectService


def _project_data(name="Apollo") -> ProjectCreate:
    return ProjectCreate(
        name=name,
        description="launch board",
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 2, 1),
    )


def test_create_project_returns_persisted_row(db):
    result = ProjectService(db).create_project(_project_data())

    assert result.success
    assert result.error is None
    assert result.data.id is not None
    assert result.data.name == "Apollo"
    assert db.scalar(select(func.count()).select_from(Project)) == 1


def test_get_projects_empty(db):
    result = ProjectService(db).get_projects()
    assert result.success
    assert result.data == []


def test_get_projects_in_id_order(db):
    service = ProjectService(db)
    service.create_project(_project_data("First"))
    service.create_project(_project_data("Second"))

    names = [project.name for project in service.get_projects().data]
    assert names == ["First", "Second"]


def test_delete_project_cascades_to_tasks(db, project, make_task):
    make_task("one")
    make_task("two")

    result = ProjectService(db).delete_project(project.id)

    assert result.success
    assert result.data == {"id": project.id, "affected": 1}
    assert db.scalar(select(func.count()).select_from(Task)) == 0


def test_delete_missing_project_still_succeeds(db):
    result = ProjectService(db).delete_project(9999)
    assert result.success
    assert result.data["affected"] == 0


def test_create_project_database_failure(db, monkeypatch):
    def broken_commit():
        raise OperationalError("INSERT INTO projects", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", broken_commit)
    result = ProjectService(db).create_project(_project_data())

    assert not result.success
    assert result.error_code == ErrorCode.DATABASE_ERROR.value
    assert result.error == "disk I/O error"
    assert result.data is None


def test_get_projects_database_failure_returns_empty_list(db, monkeypatch):
    def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("no such table: projects"))

    monkeypatch.setattr(db, "execute", broken_execute)
    result = ProjectService(db).get_projects()

    assert result.success
    assert result.data == []
