"""Pytest fixtures：内存SQLite数据库、TestClient 与记录调用的看板网关"""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from taskboard.board.actions import BoardActions, LocalActions
from taskboard.core.database import create_db_engine, create_session_factory, create_tables, get_db
from taskboard.main import app
from taskboard.models import Project, Task, User
from taskboard.schemas.base import ActionResult, ListResult
from taskboard.schemas.task import TaskResponse


@pytest.fixture()
def engine():
    db_engine = create_db_engine("sqlite://")
    create_tables(db_engine)
    try:
        yield db_engine
    finally:
        db_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def user(db) -> User:
    author = User(cognito_id="cognito-alice", username="alice")
    db.add(author)
    db.commit()
    db.refresh(author)
    return author


@pytest.fixture()
def project(db) -> Project:
    board_project = Project(
        name="Apollo",
        description="launch board",
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 3, 1),
    )
    db.add(board_project)
    db.commit()
    db.refresh(board_project)
    return board_project


@pytest.fixture()
def make_task(db, project, user):
    """直接写入数据库的任务工厂"""
    def _make(title="Task", status="TO DO", **kwargs) -> Task:
        task = Task(
            title=title,
            status=status,
            project_id=kwargs.pop("project_id", project.id),
            author_user_id=kwargs.pop("author_user_id", user.user_id),
            **kwargs
        )
        db.add(task)
        db.commit()
        db.refresh(task)
        return task
    return _make


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def local_actions(session_factory) -> LocalActions:
    return LocalActions(session_factory)


# --- 记录调用的网关 ---------------------------------------------------------

class RecordingActions(BoardActions):
    """记录每次调用；responses 中可放结果、异常或可调用对象"""

    def __init__(self):
        self.calls = []
        self.responses = {}

    def _respond(self, name, default, *args):
        self.calls.append((name,) + args)
        response = self.responses.get(name, default)
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(*args)
        return response

    def create_project(self, project_data):
        return self._respond("create_project", ActionResult.ok(), project_data)

    def get_projects(self):
        return self._respond("get_projects", ListResult())

    def delete_project(self, project_id):
        return self._respond("delete_project", ActionResult.ok(), project_id)

    def create_task(self, task_data):
        return self._respond("create_task", ActionResult.ok(), task_data)

    def get_tasks(self, project_id):
        return self._respond("get_tasks", ListResult(), project_id)

    def delete_task(self, task_id):
        return self._respond("delete_task", ActionResult.ok({"id": task_id}), task_id)

    def update_task_status(self, task_id, new_status):
        return self._respond("update_task_status", ActionResult.ok(), task_id, new_status)


@pytest.fixture()
def recording_actions() -> RecordingActions:
    return RecordingActions()


@pytest.fixture()
def task_response():
    """构造看板上的任务数据"""
    def _make(task_id: int, status="TO DO", **kwargs) -> TaskResponse:
        return TaskResponse(
            id=task_id,
            title=kwargs.pop("title", f"Task {task_id}"),
            status=status,
            project_id=kwargs.pop("project_id", 1),
            author_user_id=kwargs.pop("author_user_id", 1),
            **kwargs
        )
    return _make
