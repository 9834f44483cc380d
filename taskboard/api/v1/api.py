from fastapi import APIRouter

from taskboard.api.v1.endpoints import projects, tasks

api_router = APIRouter()

# 项目管理路由
api_router.include_router(projects.router, prefix="/projects", tags=["项目管理"])

# 任务管理路由
api_router.include_router(tasks.router, prefix="/tasks", tags=["任务管理"])
