"""
模型模块初始化文件
提供统一的导入接口
"""

from taskboard.core.database import Base

from .enums import (
    TaskStatus, TaskPriority,
    BOARD_STATUSES, DEFAULT_TASK_STATUS, DEFAULT_TASK_PRIORITY
)
from .user import User, Team
from .project import Project, ProjectTeam
from .task import Task, TaskAssignment, Attachment, Comment

__all__ = [
    'Base',

    # 枚举类型
    'TaskStatus', 'TaskPriority',
    'BOARD_STATUSES', 'DEFAULT_TASK_STATUS', 'DEFAULT_TASK_PRIORITY',

    # 模型类
    'User', 'Team', 'Project', 'ProjectTeam',
    'Task', 'TaskAssignment', 'Attachment', 'Comment'
]
