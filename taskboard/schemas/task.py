from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from taskboard.models.enums import TaskPriority, TaskStatus

from .base import CamelModel


def board_status(value: str) -> str:
    """只允许看板上的四种状态，大小写不敏感，返回规范值"""
    try:
        return TaskStatus.from_str(value).value
    except ValueError:
        allowed = ", ".join(status.value for status in TaskStatus)
        raise ValueError(f"status must be one of: {allowed}")


# 任务相关模式
class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1, description="任务标题")
    description: Optional[str] = None
    status: Optional[str] = Field(None, description="任务状态，保存时统一为大写")
    priority: Optional[TaskPriority] = None
    tags: Optional[str] = Field(None, description="逗号分隔的标签")
    start_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    points: Optional[int] = Field(None, ge=0)
    project_id: int
    author_user_id: int
    assigned_user_id: Optional[int] = None

    @field_validator('title', 'description', mode='before')
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('status', mode='before')
    @classmethod
    def blank_status_as_default(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        """未指定时保留 None，由服务层使用默认状态"""
        return board_status(v) if v is not None else None

    @field_validator('tags', mode='before')
    @classmethod
    def join_tags(cls, v):
        """标签列表合并为逗号分隔字符串，空值存为 None"""
        if isinstance(v, (list, tuple)):
            v = ",".join(str(tag).strip() for tag in v if str(tag).strip())
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('start_date', 'due_date', mode='before')
    @classmethod
    def empty_date_as_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class TaskStatusUpdate(CamelModel):
    status: str

    @field_validator('status')
    @classmethod
    def validate_board_status(cls, v):
        return board_status(v)


class TaskResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    tags: Optional[str] = None
    start_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    points: Optional[int] = None
    project_id: int
    author_user_id: int
    assigned_user_id: Optional[int] = None
