import os
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    # 应用配置
    APP_NAME: str = "Taskboard"
    APP_DESCRIPTION: str = "项目与任务看板后端API"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    API_V1_STR: str = "/api/v1"
    INIT_DB_ON_STARTUP: bool = True

    # 服务器配置
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 8000

    # 数据库配置
    DATABASE_URL: str = "sqlite:///./taskboard.db"
    DATABASE_ECHO: bool = False  # 是否显示SQLAlchemy的SQL日志

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOG_MAX_SIZE: int = 10 * 1024 * 1024  # 10 MB
    LOG_BACKUP_COUNT: int = 5
    LOG_ENABLE_COLORS: bool = True
    LOG_JSON: bool = False

    # CORS配置
    CORS_ORIGINS: list[str] = ["*"]  # 生产环境请修改

    # 看板客户端配置
    BOARD_API_URL: str = "http://127.0.0.1:8000"
    BOARD_REQUEST_TIMEOUT: Optional[float] = None  # None 表示使用传输层默认值

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# 创建全局设置实例
settings = Settings()
