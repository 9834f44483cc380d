"""看板状态的纯函数

所有函数都返回新的列表，不修改传入的任务列表。
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from taskboard.models.enums import BOARD_STATUSES
from taskboard.schemas.base import ActionResult
from taskboard.schemas.task import TaskResponse


@dataclass(frozen=True)
class DragItem:
    """拖拽开始时记录的任务ID和当时的状态"""
    id: int
    current_status: Optional[str]


def partition_tasks(tasks: Sequence[TaskResponse]) -> Dict[str, List[TaskResponse]]:
    """按看板列的固定顺序分组，状态不属于任何列的任务不出现"""
    columns = {status: [] for status in BOARD_STATUSES}
    for task in tasks:
        if task.status in columns:
            columns[task.status].append(task)
    return columns


def column_counts(tasks: Sequence[TaskResponse]) -> Dict[str, int]:
    return {status: len(column) for status, column in partition_tasks(tasks).items()}


def hidden_tasks(tasks: Sequence[TaskResponse]) -> List[TaskResponse]:
    """状态不在看板列中的任务（例如默认的 PENDING）"""
    return [task for task in tasks if task.status not in BOARD_STATUSES]


def split_tags(tags: Optional[str]) -> List[str]:
    if not tags:
        return []
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def reconcile_status_change(
    tasks: Sequence[TaskResponse],
    task_id: int,
    new_status: str,
    result: ActionResult,
) -> List[TaskResponse]:
    """状态更新成功后才修改本地列表，失败时原样返回"""
    if not result.success:
        return list(tasks)

    server_task = result.data if isinstance(result.data, TaskResponse) else None
    status = server_task.status if server_task is not None and server_task.status else new_status
    return [
        task.model_copy(update={"status": status}) if task.id == task_id else task
        for task in tasks
    ]


def reconcile_deletion(
    tasks: Sequence[TaskResponse],
    task_id: int,
    result: ActionResult,
) -> List[TaskResponse]:
    """删除成功，或服务端已不存在该任务时，从本地列表移除"""
    if not (result.success or result.is_not_found):
        return list(tasks)
    return [task for task in tasks if task.id != task_id]
