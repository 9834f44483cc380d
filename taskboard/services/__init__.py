from .project_service import ProjectService
from .task_service import TaskService

__all__ = ['ProjectService', 'TaskService']
