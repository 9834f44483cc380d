"""看板控制器

持有某个项目的任务列表，处理拖拽改状态与删除。
本地列表只在服务端调用返回成功后才更新（悲观更新），失败时保持原值并通知渲染层。
"""
from typing import Callable, Dict, List, Optional

from taskboard.core.logging import get_logger
from taskboard.models.enums import TaskStatus
from taskboard.schemas.task import TaskResponse

from .actions import BoardActions
from .state import (
    DragItem,
    column_counts,
    hidden_tasks,
    partition_tasks,
    reconcile_deletion,
    reconcile_status_change,
)

logger = get_logger(__name__)

FETCH_ERROR_MESSAGE = "An error occurred while fetching tasks"


class BoardController:
    """单个项目看板的状态容器"""

    def __init__(
        self,
        project_id: int,
        actions: BoardActions,
        open_new_task: Optional[Callable[[], None]] = None,
        on_fatal_error: Optional[Callable[[str], None]] = None,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self.project_id = project_id
        self.actions = actions
        self._open_new_task = open_new_task
        self._on_fatal_error = on_fatal_error
        self._notify = notify

        self.tasks: List[TaskResponse] = []
        self.is_loading = True
        self.error: Optional[str] = None
        self.mounted = True

    # 视图数据
    @property
    def columns(self) -> Dict[str, List[TaskResponse]]:
        return partition_tasks(self.tasks)

    @property
    def counts(self) -> Dict[str, int]:
        return column_counts(self.tasks)

    @property
    def hidden_tasks(self) -> List[TaskResponse]:
        return hidden_tasks(self.tasks)

    def load(self) -> bool:
        """加载项目任务，失败时进入错误状态且不展示部分列表"""
        self.is_loading = True
        try:
            result = self.actions.get_tasks(self.project_id)
        except Exception as e:
            logger.error(f"Error fetching tasks for project {self.project_id}: {str(e)}", exc_info=True)
            if self.mounted:
                self._enter_error_state(str(e) or FETCH_ERROR_MESSAGE)
            return False

        if not self.mounted:
            return False

        if not result.success:
            self._enter_error_state(FETCH_ERROR_MESSAGE)
            return False

        self.tasks = list(result.data)
        self.error = None
        self.is_loading = False
        return True

    def begin_drag(self, task_id: int) -> DragItem:
        """记录被拖拽任务的ID和当前状态"""
        for task in self.tasks:
            if task.id == task_id:
                return DragItem(id=task.id, current_status=task.status)
        raise KeyError(f"Task {task_id} is not on this board")

    def drop(self, item: DragItem, target_status: str) -> bool:
        """把任务放到目标列；返回本地列表是否发生了变化"""
        target = TaskStatus.from_str(target_status).value

        # 放回原列不算移动，不发起调用
        if item.current_status == target:
            return False

        try:
            result = self.actions.update_task_status(item.id, target)
        except Exception as e:
            logger.error(f"Error updating task status: {str(e)}", exc_info=True)
            self._report_failure(f"Error updating task status: {str(e)}")
            return False

        if not self.mounted:
            logger.debug(f"Board for project {self.project_id} unmounted, discarding status update of task {item.id}")
            return False

        self.tasks = reconcile_status_change(self.tasks, item.id, target, result)
        if not result.success:
            logger.error(f"Error updating task status: {result.error}")
            self._report_failure(result.error)
            return False
        return True

    def delete_task(self, task_id: int) -> bool:
        """先删除服务端任务，调用返回后再从本地列表移除"""
        try:
            result = self.actions.delete_task(task_id)
        except Exception as e:
            logger.error(f"Failed to delete task: {str(e)}", exc_info=True)
            self._report_failure(f"Failed to delete task: {str(e)}")
            return False

        if not self.mounted:
            return False

        self.tasks = reconcile_deletion(self.tasks, task_id, result)
        if not result.success:
            logger.error(f"Failed to delete task {task_id}: {result.error}")
            self._report_failure(result.error)
            return False
        return True

    def request_new_task(self) -> None:
        if self._open_new_task is not None:
            self._open_new_task()

    def unmount(self) -> None:
        """卸载后，仍在进行中的调用结果将被丢弃"""
        self.mounted = False

    def _enter_error_state(self, message: str) -> None:
        self.tasks = []
        self.error = message
        self.is_loading = False
        if self._on_fatal_error is not None:
            self._on_fatal_error(message)

    def _report_failure(self, message: Optional[str]) -> None:
        if self.mounted and self._notify is not None:
            self._notify(message or "Unknown error")
