from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from taskboard.core.database import get_db
from taskboard.schemas.task import TaskCreate, TaskStatusUpdate
from taskboard.services import TaskService
from taskboard.utils.response_utils import action_response, list_response

router = APIRouter()


@router.post("")
def create_task(task_data: TaskCreate, db: Session = Depends(get_db)):
    """创建任务"""
    result = TaskService(db).create_task(task_data)
    return action_response(result, success_status=status.HTTP_201_CREATED)


@router.get("")
def get_tasks(
    project_id: int = Query(..., alias="projectId", description="项目ID"),
    db: Session = Depends(get_db)
):
    """获取项目下的任务列表"""
    return list_response(TaskService(db).get_tasks(project_id))


@router.delete("/{task_id}")
def delete_task(task_id: int, db: Session = Depends(get_db)):
    """删除任务"""
    return action_response(TaskService(db).delete_task(task_id))


@router.patch("/{task_id}/status")
def update_task_status(task_id: int, status_data: TaskStatusUpdate, db: Session = Depends(get_db)):
    """更新任务状态（看板拖拽）"""
    return action_response(TaskService(db).update_task_status(task_id, status_data.status))
