from typing import Any, Dict

from fastapi import status
from fastapi.responses import JSONResponse

from taskboard.core.status_codes import get_http_status
from taskboard.schemas.base import ActionResult, ListResult


def envelope_content(result: ActionResult) -> Dict[str, Any]:
    """序列化结果信封，省略值为 None 的顶层字段"""
    content = result.model_dump(mode="json", by_alias=True)
    return {key: value for key, value in content.items() if value is not None}


def action_response(result: ActionResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """
    生成变更操作的响应

    参数:
        result: 服务层返回的结果信封
        success_status: 成功时使用的HTTP状态码

    返回:
        失败时按错误代码映射HTTP状态码的JSONResponse
    """
    status_code = success_status if result.success else get_http_status(result.error_code)
    return JSONResponse(status_code=status_code, content=envelope_content(result))


def list_response(result: ListResult) -> JSONResponse:
    """生成列表操作的响应，始终为200"""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=result.model_dump(mode="json", by_alias=True)
    )
