import pytest

from taskboard.board import LocalActions
from taskboard.core import database


def test_uninitialized_database_is_reported(monkeypatch):
    monkeypatch.setattr(database, "SessionLocal", None)

    with pytest.raises(RuntimeError, match="not initialized"):
        next(database.get_db())
    with pytest.raises(RuntimeError, match="not initialized"):
        LocalActions().get_projects()


def test_local_actions_fall_back_to_global_factory(monkeypatch, session_factory, project):
    monkeypatch.setattr(database, "SessionLocal", session_factory)

    assert database.get_session_factory() is session_factory
    assert [p.id for p in LocalActions().get_projects().data] == [project.id]
