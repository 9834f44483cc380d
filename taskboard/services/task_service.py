"""任务服务模块

包含任务的创建、查询、删除以及看板拖拽触发的状态更新
"""
from sqlalchemy import delete, select, update

from taskboard.core.exceptions import ResourceNotFoundException
from taskboard.core.logging import app_logger, get_logger
from taskboard.models import DEFAULT_TASK_PRIORITY, DEFAULT_TASK_STATUS, Task
from taskboard.schemas.base import ActionResult, ListResult
from taskboard.schemas.task import TaskCreate, TaskResponse

from .base import BaseService, listing, mutation

logger = get_logger(__name__)


def normalize_status(status: str) -> str:
    """状态统一保存为大写"""
    return status.strip().upper()


class TaskService(BaseService):
    """任务服务类"""

    @mutation("create task")
    def create_task(self, task_data: TaskCreate) -> ActionResult[TaskResponse]:
        """创建新任务

        未指定状态时使用 PENDING，未指定优先级时使用 Medium，故事点默认为 0。
        """
        task = Task(
            title=task_data.title,
            description=task_data.description,
            status=normalize_status(task_data.status) if task_data.status else DEFAULT_TASK_STATUS,
            priority=task_data.priority.value if task_data.priority else DEFAULT_TASK_PRIORITY,
            tags=task_data.tags,
            start_date=task_data.start_date,
            due_date=task_data.due_date,
            points=task_data.points if task_data.points is not None else 0,
            project_id=task_data.project_id,
            author_user_id=task_data.author_user_id,
            assigned_user_id=task_data.assigned_user_id,
        )
        logger.debug(f"Creating task '{task.title}' in project {task.project_id} with status {task.status}")

        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)

        app_logger.log_database_operation("insert", Task.__tablename__, record_id=task.id)
        return ActionResult.ok(TaskResponse.model_validate(task))

    @listing("tasks")
    def get_tasks(self, project_id: int) -> ListResult[TaskResponse]:
        """获取指定项目下的全部任务"""
        tasks = self.db.execute(
            select(Task).where(Task.project_id == project_id).order_by(Task.id)
        ).scalars().all()
        return ListResult(data=[TaskResponse.model_validate(task) for task in tasks])

    @mutation("delete task")
    def delete_task(self, task_id: int) -> ActionResult[dict]:
        """删除任务，仅当确实删除了一行时才视为成功"""
        result = self.db.execute(delete(Task).where(Task.id == task_id))
        self.db.commit()

        if not result.rowcount:
            raise ResourceNotFoundException("Task", task_id, message="Task not found")

        app_logger.log_database_operation("delete", Task.__tablename__, record_id=task_id)
        return ActionResult.ok({"id": task_id})

    @mutation("update task status")
    def update_task_status(self, task_id: int, new_status: str) -> ActionResult[TaskResponse]:
        """更新任务状态，单条 UPDATE ... RETURNING 完成更新与读取"""
        task = self.db.execute(
            update(Task)
            .where(Task.id == task_id)
            .values(status=normalize_status(new_status))
            .returning(Task)
        ).scalar_one_or_none()
        if task is None:
            raise ResourceNotFoundException("Task", task_id, message="Task not found")
        self.db.commit()

        app_logger.log_business_event(
            "task_status_changed",
            entity_type="task",
            entity_id=task.id,
            to_status=task.status
        )
        return ActionResult.ok(TaskResponse.model_validate(task))
