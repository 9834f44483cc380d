from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.core.config import settings

# 创建基础模型类
Base = declarative_base()

# 全局变量，用于存储引擎和会话工厂
engine: Optional[Engine] = None
SessionLocal: Optional[sessionmaker] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite 默认不检查外键，级联删除依赖于此设置"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """根据数据库URL创建引擎"""
    engine_kwargs = {"echo": echo, "pool_pre_ping": True}

    if database_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        # 内存数据库需要共享同一个连接
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool

    db_engine = create_engine(database_url, **engine_kwargs)

    if db_engine.dialect.name == "sqlite":
        event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)

    return db_engine


def create_session_factory(db_engine: Engine) -> sessionmaker:
    return sessionmaker(bind=db_engine, autoflush=False, expire_on_commit=False)


def init_db_connection(database_url: Optional[str] = None) -> Engine:
    """初始化全局数据库连接"""
    global engine, SessionLocal
    engine = create_db_engine(database_url or settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    SessionLocal = create_session_factory(engine)
    return engine


def create_tables(db_engine: Optional[Engine] = None) -> None:
    """创建所有数据表"""
    # 导入模型以注册数据表
    import taskboard.models  # noqa: F401

    Base.metadata.create_all(bind=db_engine or engine)


def get_session_factory() -> sessionmaker:
    """返回全局会话工厂，未初始化时抛出 RuntimeError"""
    if SessionLocal is None:
        raise RuntimeError("Database connection not initialized. Call init_db_connection() first.")
    return SessionLocal


# 数据库依赖注入
def get_db() -> Generator[Session, None, None]:
    session = get_session_factory()()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
