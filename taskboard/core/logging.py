import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from taskboard.core.config import settings

# 结构化日志中会被输出的额外字段
EXTRA_FIELDS = (
    "request_id", "method", "endpoint", "status_code", "response_time",
    "operation", "table", "record_id", "affected",
    "event_type", "entity_type", "entity_id", "to_status",
)


class JSONFormatter(logging.Formatter):
    """JSON格式的日志格式化器"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """带颜色的控制台日志格式化器"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m'
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']

        record.asctime = self.formatTime(record, self.datefmt)

        log_message = (
            f"{color}[{record.asctime}] "
            f"{record.levelname:8} "
            f"{record.name}:{record.lineno} - "
            f"{record.getMessage()}{reset}"
        )

        if record.exc_info:
            log_message += "\n" + self.formatException(record.exc_info)

        return log_message


PLAIN_FORMAT = '[%(asctime)s] %(levelname)-8s %(name)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_json: bool = False,
    enable_colors: bool = True
) -> None:
    """设置日志配置"""
    log_level = (log_level or settings.LOG_LEVEL).upper()
    log_file = log_file or settings.LOG_FILE

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    root_logger.handlers.clear()

    # 控制台处理器
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level))
    if enable_colors and sys.stdout.isatty():
        console_handler.setFormatter(ColoredFormatter(datefmt=DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # 文件处理器
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=settings.LOG_MAX_SIZE,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(getattr(logging, log_level))
        if enable_json:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

    # 设置第三方库的日志级别
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DATABASE_ECHO else logging.WARNING
    )
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """获取日志记录器"""
    return logging.getLogger(name)


class StructuredLogger:
    """结构化日志记录器"""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs):
        self.logger.log(level, message, exc_info=exc_info, extra=kwargs)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, **kwargs)


class AppLogger:
    """应用程序日志记录器"""

    def __init__(self):
        self.api_logger = StructuredLogger("taskboard.api")
        self.db_logger = StructuredLogger("taskboard.database")
        self.business_logger = StructuredLogger("taskboard.business")

    def log_api_request(self, method: str, endpoint: str, status_code: int = None,
                        response_time: float = None, request_id: str = None):
        """记录API请求"""
        self.api_logger.info(
            f"{method} {endpoint} - {status_code}",
            method=method,
            endpoint=endpoint,
            status_code=status_code,
            response_time=response_time,
            request_id=request_id
        )

    def log_database_operation(self, operation: str, table: str, record_id=None, **kwargs):
        """记录数据库操作"""
        self.db_logger.info(
            f"Database {operation} on {table}",
            operation=operation,
            table=table,
            record_id=record_id,
            **kwargs
        )

    def log_business_event(self, event_type: str, entity_type: str = None,
                           entity_id=None, **kwargs):
        """记录业务事件"""
        self.business_logger.info(
            f"Business event: {event_type}",
            event_type=event_type,
            entity_type=entity_type,
            entity_id=entity_id,
            **kwargs
        )


# 全局应用程序日志记录器实例
app_logger = AppLogger()


def init_logging():
    """初始化日志系统"""
    setup_logging(
        log_level=settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
        enable_json=settings.LOG_JSON or settings.is_production,
        enable_colors=settings.LOG_ENABLE_COLORS
    )

    logger = get_logger(__name__)
    logger.info(f"Logging initialized - Level: {settings.LOG_LEVEL}, Environment: {settings.ENVIRONMENT}")
