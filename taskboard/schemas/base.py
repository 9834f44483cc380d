from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from taskboard.core.exceptions import BusinessException
from taskboard.core.status_codes import ErrorCode

DataT = TypeVar('DataT')


class CamelModel(BaseModel):
    """对外使用 camelCase 字段名，同时接受 snake_case 输入"""

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class ActionResult(CamelModel, Generic[DataT]):
    """变更类操作的统一结果信封

    成功: {"success": true, "data": ...}
    失败: {"success": false, "error": "...", "errorCode": "..."}
    """
    success: bool
    data: Optional[DataT] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, data=None):
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, error_code: ErrorCode = ErrorCode.DATABASE_ERROR):
        return cls(success=False, error=error, error_code=ErrorCode(error_code).value)

    @classmethod
    def from_exception(cls, exc: BusinessException):
        """业务异常转换为失败信封"""
        return cls.fail(exc.message, exc.code)

    @property
    def is_not_found(self) -> bool:
        return self.error_code == ErrorCode.NOT_FOUND.value


class ListResult(CamelModel, Generic[DataT]):
    """列表类操作的结果信封，读取失败时同样返回空列表"""
    success: bool = True
    data: List[DataT] = Field(default_factory=list)
