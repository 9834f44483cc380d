"""新建项目/任务表单

必填字段在调用方检查，缺失时直接返回校验失败，不会发起任何变更调用。
"""
from datetime import datetime
from typing import Callable, List, Optional, Union

from pydantic import ValidationError

from taskboard.core.exceptions import ValidationException
from taskboard.core.logging import get_logger
from taskboard.schemas.base import ActionResult
from taskboard.schemas.project import ProjectCreate
from taskboard.schemas.task import TaskCreate

from .actions import BoardActions

logger = get_logger(__name__)

DateInput = Union[str, datetime, None]


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _validation_failure(e: ValidationError) -> ActionResult:
    error = e.errors()[0]
    field = ".".join(str(loc) for loc in error.get("loc", ()))
    message = f"{field}: {error.get('msg')}" if field else error.get("msg")
    return ActionResult.from_exception(ValidationException(message))


class NewProjectForm:
    """新建项目表单，名称、开始时间、结束时间为必填"""

    def __init__(self, actions: BoardActions):
        self.actions = actions

    def submit(
        self,
        name: Optional[str],
        start_date: DateInput,
        end_date: DateInput,
        description: Optional[str] = None,
    ) -> ActionResult:
        if _is_blank(name) or _is_blank(start_date) or _is_blank(end_date):
            logger.debug("Project form submitted with missing required fields")
            return ActionResult.from_exception(ValidationException())

        try:
            project_data = ProjectCreate(
                name=name,
                description=description,
                start_date=start_date,
                end_date=end_date,
            )
        except ValidationError as e:
            return _validation_failure(e)

        return self.actions.create_project(project_data)


class NewTaskForm:
    """新建任务表单，标题与所属项目为必填

    在看板中打开时 project_id 固定为当前项目；作者由登录用户决定。
    """

    def __init__(
        self,
        actions: BoardActions,
        author_user_id: int,
        project_id: Optional[int] = None,
        on_created: Optional[Callable[[ActionResult], None]] = None,
    ):
        self.actions = actions
        self.author_user_id = author_user_id
        self.project_id = project_id
        self._on_created = on_created

    def submit(
        self,
        title: Optional[str],
        project_id: Optional[int] = None,
        description: Optional[str] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        tags: Union[str, List[str], None] = None,
        start_date: DateInput = None,
        due_date: DateInput = None,
        points: Optional[int] = None,
        assigned_user_id: Optional[int] = None,
    ) -> ActionResult:
        target_project = self.project_id if self.project_id is not None else project_id
        if _is_blank(title) or target_project is None:
            logger.debug("Task form submitted with missing required fields")
            return ActionResult.from_exception(ValidationException())

        try:
            task_data = TaskCreate(
                title=title,
                description=description,
                status=status,
                priority=priority or None,
                tags=tags,
                start_date=start_date,
                due_date=due_date,
                points=points,
                project_id=target_project,
                author_user_id=self.author_user_id,
                assigned_user_id=assigned_user_id,
            )
        except ValidationError as e:
            return _validation_failure(e)

        result = self.actions.create_task(task_data)
        if result.success and self._on_created is not None:
            self._on_created(result)
        return result
