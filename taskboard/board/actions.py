"""看板调用的变更层网关

LocalActions 在进程内调用服务层，每次调用使用独立会话；
HttpActions 通过 HTTP 调用 /api/v1 接口，传输层异常会直接抛出给调用方。
"""
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Optional

import requests
from sqlalchemy.orm import Session, sessionmaker

from taskboard.core import database
from taskboard.core.config import settings
from taskboard.schemas.base import ActionResult, ListResult
from taskboard.schemas.project import ProjectCreate, ProjectResponse
from taskboard.schemas.task import TaskCreate, TaskResponse
from taskboard.services import ProjectService, TaskService


class BoardActions(ABC):
    """变更层调用契约"""

    @abstractmethod
    def create_project(self, project_data: ProjectCreate) -> ActionResult[ProjectResponse]:
        ...

    @abstractmethod
    def get_projects(self) -> ListResult[ProjectResponse]:
        ...

    @abstractmethod
    def delete_project(self, project_id: int) -> ActionResult[dict]:
        ...

    @abstractmethod
    def create_task(self, task_data: TaskCreate) -> ActionResult[TaskResponse]:
        ...

    @abstractmethod
    def get_tasks(self, project_id: int) -> ListResult[TaskResponse]:
        ...

    @abstractmethod
    def delete_task(self, task_id: int) -> ActionResult[dict]:
        ...

    @abstractmethod
    def update_task_status(self, task_id: int, new_status: str) -> ActionResult[TaskResponse]:
        ...


class LocalActions(BoardActions):
    """进程内网关"""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self.session_factory = session_factory

    @contextmanager
    def _session(self):
        factory = self.session_factory or database.get_session_factory()
        session: Session = factory()
        try:
            yield session
        finally:
            session.close()

    def create_project(self, project_data):
        with self._session() as db:
            return ProjectService(db).create_project(project_data)

    def get_projects(self):
        with self._session() as db:
            return ProjectService(db).get_projects()

    def delete_project(self, project_id):
        with self._session() as db:
            return ProjectService(db).delete_project(project_id)

    def create_task(self, task_data):
        with self._session() as db:
            return TaskService(db).create_task(task_data)

    def get_tasks(self, project_id):
        with self._session() as db:
            return TaskService(db).get_tasks(project_id)

    def delete_task(self, task_id):
        with self._session() as db:
            return TaskService(db).delete_task(task_id)

    def update_task_status(self, task_id, new_status):
        with self._session() as db:
            return TaskService(db).update_task_status(task_id, new_status)


class HttpActions(BoardActions):
    """HTTP网关

    session 可以是 requests.Session，也可以是接口兼容的客户端（例如测试用的 TestClient）。
    无论HTTP状态码为何，只要响应体是结果信封就按信封解析。
    """

    def __init__(self, base_url: Optional[str] = None, session=None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.BOARD_API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.BOARD_REQUEST_TIMEOUT

    def _url(self, path: str) -> str:
        return f"{self.base_url}{settings.API_V1_STR}{path}"

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        response = self.session.request(method, self._url(path), **kwargs)
        try:
            return response.json()
        except ValueError:
            # 非信封响应（例如代理返回的HTML错误页）
            response.raise_for_status()
            raise

    def create_project(self, project_data):
        payload = self._request("POST", "/projects", json=project_data.model_dump(mode="json", by_alias=True))
        return ActionResult[ProjectResponse].model_validate(payload)

    def get_projects(self):
        return ListResult[ProjectResponse].model_validate(self._request("GET", "/projects"))

    def delete_project(self, project_id):
        return ActionResult[dict].model_validate(self._request("DELETE", f"/projects/{project_id}"))

    def create_task(self, task_data):
        payload = self._request("POST", "/tasks", json=task_data.model_dump(mode="json", by_alias=True))
        return ActionResult[TaskResponse].model_validate(payload)

    def get_tasks(self, project_id):
        payload = self._request("GET", "/tasks", params={"projectId": project_id})
        return ListResult[TaskResponse].model_validate(payload)

    def delete_task(self, task_id):
        return ActionResult[dict].model_validate(self._request("DELETE", f"/tasks/{task_id}"))

    def update_task_status(self, task_id, new_status):
        payload = self._request("PATCH", f"/tasks/{task_id}/status", json={"status": new_status})
        return ActionResult[TaskResponse].model_validate(payload)
