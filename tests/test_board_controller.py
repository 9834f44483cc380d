import logging

import pytest
import requests
from sqlalchemy import select

from taskboard.board import BoardController, DragItem
from taskboard.core.status_codes import ErrorCode
from taskboard.models import Task
from taskboard.schemas.base import ActionResult, ListResult


@pytest.fixture()
def board(recording_actions, task_response):
    recording_actions.responses["get_tasks"] = ListResult(data=[
        task_response(1, "TO DO"),
        task_response(2, "WORKING PROGRESS"),
        task_response(3, "PENDING"),
    ])
    controller = BoardController(project_id=1, actions=recording_actions, notify=lambda message: None)
    assert controller.load()
    recording_actions.calls.clear()
    return controller


def test_load_populates_board(board):
    assert not board.is_loading
    assert board.error is None
    assert board.counts["TO DO"] == 1
    assert board.counts["WORKING PROGRESS"] == 1
    assert [task.id for task in board.hidden_tasks] == [3]


def test_load_transport_error_enters_error_state(recording_actions):
    fatal = []
    recording_actions.responses["get_tasks"] = requests.ConnectionError("connection refused")
    controller = BoardController(project_id=1, actions=recording_actions, on_fatal_error=fatal.append)

    assert not controller.load()

    assert controller.tasks == []
    assert not controller.is_loading
    assert controller.error == "connection refused"
    assert fatal == ["connection refused"]


def test_load_failure_envelope_enters_error_state(recording_actions):
    recording_actions.responses["get_tasks"] = ListResult(success=False)
    controller = BoardController(project_id=1, actions=recording_actions)

    assert not controller.load()
    assert controller.error == "An error occurred while fetching tasks"


def test_drop_on_same_column_makes_no_call(board, recording_actions):
    item = board.begin_drag(1)

    assert not board.drop(item, "to do")
    assert recording_actions.calls == []


def test_drop_moves_task_after_success(board, recording_actions):
    item = board.begin_drag(1)

    assert board.drop(item, "Completed")

    assert recording_actions.calls == [("update_task_status", 1, "COMPLETED")]
    assert [task.id for task in board.columns["COMPLETED"]] == [1]
    assert board.columns["TO DO"] == []


def test_drop_failure_keeps_board_and_notifies(recording_actions, task_response, caplog):
    notices = []
    recording_actions.responses["get_tasks"] = ListResult(data=[task_response(1, "TO DO")])
    recording_actions.responses["update_task_status"] = ActionResult.fail("database is locked")
    controller = BoardController(project_id=1, actions=recording_actions, notify=notices.append)
    controller.load()

    with caplog.at_level(logging.ERROR, logger="taskboard.board.controller"):
        assert not controller.drop(DragItem(id=1, current_status="TO DO"), "COMPLETED")

    assert controller.tasks[0].status == "TO DO"
    assert notices == ["database is locked"]
    assert "database is locked" in caplog.text


def test_drop_transport_error_keeps_board(board, recording_actions):
    recording_actions.responses["update_task_status"] = requests.Timeout("read timed out")

    assert not board.drop(board.begin_drag(2), "UNDER REVIEW")
    assert board.columns["WORKING PROGRESS"][0].id == 2


def test_drop_onto_unknown_column(board, recording_actions):
    with pytest.raises(ValueError):
        board.drop(board.begin_drag(1), "ARCHIVED")
    assert recording_actions.calls == []


def test_begin_drag_unknown_task(board):
    with pytest.raises(KeyError):
        board.begin_drag(99)


def test_result_after_unmount_is_discarded(board, recording_actions):
    notices = []
    board._notify = notices.append

    def resolve_after_unmount(task_id, new_status):
        board.unmount()
        return ActionResult.fail("database is locked")

    recording_actions.responses["update_task_status"] = resolve_after_unmount
    before = list(board.tasks)

    assert not board.drop(board.begin_drag(1), "COMPLETED")
    assert board.tasks == before
    assert notices == []


def test_success_after_unmount_is_discarded(board, recording_actions):
    def resolve_after_unmount(task_id):
        board.unmount()
        return ActionResult.ok({"id": task_id})

    recording_actions.responses["delete_task"] = resolve_after_unmount

    assert not board.delete_task(1)
    assert 1 in [task.id for task in board.tasks]


def test_delete_removes_task_after_success(board, recording_actions):
    assert board.delete_task(1)
    assert recording_actions.calls == [("delete_task", 1)]
    assert 1 not in [task.id for task in board.tasks]


def test_delete_not_found_still_removes_task(board, recording_actions):
    recording_actions.responses["delete_task"] = ActionResult.fail("Task not found", ErrorCode.NOT_FOUND)

    assert not board.delete_task(2)
    assert 2 not in [task.id for task in board.tasks]


def test_delete_database_error_keeps_task(board, recording_actions):
    recording_actions.responses["delete_task"] = ActionResult.fail("disk I/O error")

    assert not board.delete_task(2)
    assert 2 in [task.id for task in board.tasks]


def test_request_new_task_opens_form(recording_actions):
    opened = []
    controller = BoardController(project_id=1, actions=recording_actions, open_new_task=lambda: opened.append(True))

    controller.request_new_task()

    assert opened == [True]


def test_board_over_local_actions(local_actions, db, project, make_task):
    todo = make_task("todo", status="TO DO")
    make_task("draft", status="PENDING")

    controller = BoardController(project_id=project.id, actions=local_actions)
    assert controller.load()
    assert [task.id for task in controller.columns["TO DO"]] == [todo.id]
    assert len(controller.hidden_tasks) == 1

    assert controller.drop(controller.begin_drag(todo.id), "WORKING PROGRESS")

    assert controller.columns["WORKING PROGRESS"][0].id == todo.id
    assert db.scalar(select(Task.status).where(Task.id == todo.id)) == "WORKING PROGRESS"
