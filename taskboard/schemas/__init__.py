from .base import ActionResult, CamelModel, ListResult
from .project import ProjectCreate, ProjectResponse
from .task import TaskCreate, TaskResponse, TaskStatusUpdate

__all__ = [
    'ActionResult', 'CamelModel', 'ListResult',
    'ProjectCreate', 'ProjectResponse',
    'TaskCreate', 'TaskResponse', 'TaskStatusUpdate',
]
