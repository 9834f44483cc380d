from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel


class ProjectCreate(CamelModel):
    name: str = Field(..., min_length=1, description="项目名称")
    description: Optional[str] = None
    start_date: datetime = Field(..., description="开始时间")
    end_date: datetime = Field(..., description="结束时间")

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def empty_date_as_missing(cls, v):
        """空字符串视为未填写"""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ProjectResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
