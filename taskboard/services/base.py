"""服务基础模块

变更类操作在这里被统一转换为结果信封，异常不会越过服务边界
"""
import functools

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskboard.core.exceptions import BusinessException, DatabaseException, database_error_message
from taskboard.core.logging import get_logger
from taskboard.schemas.base import ActionResult, ListResult

logger = get_logger(__name__)


class BaseService:
    """服务基类"""

    def __init__(self, db: Session):
        self.db = db


def mutation(operation: str):
    """变更操作装饰器：业务异常与数据库异常转换为失败信封"""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self: BaseService, *args, **kwargs) -> ActionResult:
            try:
                return func(self, *args, **kwargs)
            except BusinessException as e:
                self.db.rollback()
                logger.warning(f"{operation} failed: {e.message}")
                return ActionResult.from_exception(e)
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.error(f"Database error ({operation}): {str(e)}", exc_info=True)
                return ActionResult.from_exception(DatabaseException(database_error_message(e)))
        return wrapper
    return decorator


def listing(operation: str):
    """列表读取装饰器：数据库异常时记录日志并返回空列表"""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self: BaseService, *args, **kwargs) -> ListResult:
            try:
                return func(self, *args, **kwargs)
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.error(f"Error fetching {operation}: {str(e)}", exc_info=True)
                return ListResult(data=[])
        return wrapper
    return decorator
