# 错误代码与HTTP状态码映射

from enum import Enum


class ErrorCode(str, Enum):
    """错误代码枚举"""

    # 通用错误
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"

    # 数据库相关错误
    DATABASE_ERROR = "DATABASE_ERROR"


# 错误代码对应的HTTP状态码
HTTP_STATUS = {
    ErrorCode.INTERNAL_SERVER_ERROR: 500,
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.BAD_REQUEST: 400,
    ErrorCode.DATABASE_ERROR: 500,
}

# 错误代码描述映射
STATUS_MESSAGE = {
    ErrorCode.INTERNAL_SERVER_ERROR: "An unexpected error occurred",
    ErrorCode.VALIDATION_ERROR: "Please fill in all required fields.",
    ErrorCode.NOT_FOUND: "The requested resource was not found",
    ErrorCode.BAD_REQUEST: "Bad request",
    ErrorCode.DATABASE_ERROR: "Database operation failed",
}


def get_http_status(code) -> int:
    """根据错误代码获取HTTP状态码，未知代码按500处理"""
    try:
        return HTTP_STATUS[ErrorCode(code)]
    except ValueError:
        return 500


def get_message(code) -> str:
    """根据错误代码获取默认消息"""
    try:
        return STATUS_MESSAGE[ErrorCode(code)]
    except ValueError:
        return STATUS_MESSAGE[ErrorCode.INTERNAL_SERVER_ERROR]
