#!/usr/bin/env python3
"""
项目启动脚本
"""

import uvicorn

from taskboard.core.config import settings


def main():
    """启动FastAPI应用"""
    debug = settings.is_development

    print(f"启动服务器...")
    print(f"地址: http://{settings.SERVER_HOST}:{settings.SERVER_PORT}")
    print(f"运行环境: {settings.ENVIRONMENT}")
    print(f"API文档: http://{settings.SERVER_HOST}:{settings.SERVER_PORT}/docs")

    # 启动服务器
    uvicorn.run(
        "taskboard.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=debug,
        log_level="debug" if debug else "info"
    )


if __name__ == "__main__":
    main()
