"""项目服务模块

包含项目的创建、查询与删除
"""
from sqlalchemy import delete, select

from taskboard.core.logging import app_logger
from taskboard.models import Project
from taskboard.schemas.base import ActionResult, ListResult
from taskboard.schemas.project import ProjectCreate, ProjectResponse

from .base import BaseService, listing, mutation


class ProjectService(BaseService):
    """项目服务类"""

    @mutation("create project")
    def create_project(self, project_data: ProjectCreate) -> ActionResult[ProjectResponse]:
        """创建新项目"""
        project = Project(
            name=project_data.name,
            description=project_data.description,
            start_date=project_data.start_date,
            end_date=project_data.end_date,
        )

        self.db.add(project)
        self.db.commit()
        self.db.refresh(project)

        app_logger.log_database_operation("insert", Project.__tablename__, record_id=project.id)
        return ActionResult.ok(ProjectResponse.model_validate(project))

    @listing("projects")
    def get_projects(self) -> ListResult[ProjectResponse]:
        """获取全部项目"""
        projects = self.db.execute(select(Project).order_by(Project.id)).scalars().all()
        return ListResult(data=[ProjectResponse.model_validate(project) for project in projects])

    @mutation("delete project")
    def delete_project(self, project_id: int) -> ActionResult[dict]:
        """删除项目，任务由数据库外键级联删除

        删除不存在的项目同样视为成功（affected 为 0）。
        """
        result = self.db.execute(delete(Project).where(Project.id == project_id))
        self.db.commit()

        app_logger.log_database_operation(
            "delete", Project.__tablename__, record_id=project_id, affected=result.rowcount
        )
        return ActionResult.ok({"id": project_id, "affected": result.rowcount})
