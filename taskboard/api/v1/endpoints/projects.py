from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskboard.core.database import get_db
from taskboard.schemas.project import ProjectCreate
from taskboard.services import ProjectService
from taskboard.utils.response_utils import action_response, list_response

router = APIRouter()


@router.post("")
def create_project(project_data: ProjectCreate, db: Session = Depends(get_db)):
    """创建项目"""
    result = ProjectService(db).create_project(project_data)
    return action_response(result, success_status=status.HTTP_201_CREATED)


@router.get("")
def get_projects(db: Session = Depends(get_db)):
    """获取项目列表"""
    return list_response(ProjectService(db).get_projects())


@router.delete("/{project_id}")
def delete_project(project_id: int, db: Session = Depends(get_db)):
    """删除项目（级联删除任务）"""
    return action_response(ProjectService(db).delete_project(project_id))
