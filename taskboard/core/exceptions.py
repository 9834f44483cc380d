"""统一异常处理模块

定义系统中使用的业务异常类，以及把异常转换为统一结果信封的全局异常处理器
"""
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.core.logging import app_logger
from taskboard.core.status_codes import ErrorCode, get_http_status, get_message


class BusinessException(Exception):
    """业务异常基类"""

    def __init__(self, code: ErrorCode, message: str, data: Any = None, status_code: int = None):
        self.code = code
        self.message = message
        self.data = data
        self.status_code = status_code or get_http_status(code)
        super().__init__(message)


class ValidationException(BusinessException):
    """数据验证异常"""

    def __init__(self, message: str = None, data: Any = None):
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message or get_message(ErrorCode.VALIDATION_ERROR),
            data=data
        )


class ResourceNotFoundException(BusinessException):
    """资源不存在异常"""

    def __init__(self, resource_type: str, resource_id: Any = None, message: str = None):
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=message or f"{resource_type} not found",
            data={"resource_type": resource_type, "resource_id": resource_id}
        )


class DatabaseException(BusinessException):
    """数据库操作异常"""

    def __init__(self, message: str, data: Any = None):
        super().__init__(code=ErrorCode.DATABASE_ERROR, message=message, data=data)


def database_error_message(exc: SQLAlchemyError) -> str:
    """提取底层驱动的错误消息"""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def error_envelope(code: ErrorCode, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """创建失败结果信封"""
    content = {
        "success": False,
        "error": message,
        "errorCode": ErrorCode(code).value,
    }
    if details:
        content["details"] = details
    return content


# 全局异常处理器
async def business_exception_handler(request: Request, exc: BusinessException) -> JSONResponse:
    """业务异常处理器"""
    request_id = getattr(request.state, "request_id", "unknown")

    app_logger.api_logger.warning(
        f"Business exception: {exc.code.value} - {exc.message}",
        request_id=request_id,
        method=request.method,
        endpoint=request.url.path
    )

    details = exc.data if isinstance(exc.data, dict) else None
    return JSONResponse(status_code=exc.status_code, content=error_envelope(exc.code, exc.message, details))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTP异常处理器"""
    code = ErrorCode.NOT_FOUND if exc.status_code == 404 else ErrorCode.BAD_REQUEST
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(code, str(exc.detail)),
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """验证异常处理器"""
    request_id = getattr(request.state, "request_id", "unknown")

    field_errors = {}
    missing = False
    for error in exc.errors():
        field_path = ".".join(str(loc) for loc in error["loc"][1:])  # 跳过'body'/'query'
        field_errors[field_path] = error["msg"]
        # 未提供或为空的必填字段
        if error.get("type") == "missing" or error.get("input") in (None, ""):
            missing = True

    app_logger.api_logger.warning(
        f"Validation error: {field_errors}",
        request_id=request_id,
        method=request.method,
        endpoint=request.url.path
    )

    if missing or not field_errors:
        message = get_message(ErrorCode.VALIDATION_ERROR)
    else:
        field, msg = next(iter(field_errors.items()))
        message = f"{field}: {msg}" if field else msg

    return JSONResponse(
        status_code=get_http_status(ErrorCode.VALIDATION_ERROR),
        content=error_envelope(ErrorCode.VALIDATION_ERROR, message, {"field_errors": field_errors})
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """通用异常处理器"""
    request_id = getattr(request.state, "request_id", "unknown")

    app_logger.api_logger.error(
        f"Unhandled exception: {str(exc)}",
        request_id=request_id,
        method=request.method,
        endpoint=request.url.path,
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=error_envelope(ErrorCode.INTERNAL_SERVER_ERROR, get_message(ErrorCode.INTERNAL_SERVER_ERROR))
    )


def setup_exception_handlers(app):
    """设置异常处理器"""
    app.add_exception_handler(BusinessException, business_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
