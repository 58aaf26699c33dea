import logging
from datetime import datetime, timezone

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def get_utc_datetime():
    """获取当前的UTC时间（不带时区信息，与数据库DateTime列保持一致）"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def build_engine(uri: str, **kwargs):
    """
    根据连接串创建数据库引擎

    SQLite 不支持连接池参数，需要单独处理；其余数据库使用连接池设置。
    """
    if uri.startswith("sqlite"):
        return create_engine(
            uri,
            connect_args={"check_same_thread": False},
            echo=settings.SQL_ECHO,
            **kwargs
        )
    return create_engine(
        uri,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
        echo=settings.SQL_ECHO,
        **kwargs
    )


# 创建数据库引擎
engine = build_engine(settings.SQLALCHEMY_DATABASE_URI)

# 创建数据库会话
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建基本模型类
Base = declarative_base()


def _ensure_mysql_database(db_uri: str) -> None:
    """MySQL下数据库不存在时先创建数据库"""
    url = make_url(db_uri)
    db_name = url.database
    temp_engine = create_engine(url.set(database=None))
    try:
        with temp_engine.connect() as connection:
            result = connection.execute(text("SHOW DATABASES LIKE :name"), {"name": db_name})
            if not result.fetchone():
                connection.execute(text(f"CREATE DATABASE `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"))
                logger.info(f"数据库 {db_name} 已创建")
            else:
                logger.info(f"数据库 {db_name} 已存在")
    finally:
        temp_engine.dispose()


def init_db():
    """
    初始化数据库，如果表不存在则创建
    """
    if not settings.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    # 导入模型以便注册到 Base.metadata
    from app import models  # noqa: F401

    try:
        db_uri = settings.SQLALCHEMY_DATABASE_URI
        if db_uri.startswith("mysql"):
            _ensure_mysql_database(db_uri)

        Base.metadata.create_all(bind=engine)
        logger.info("所有表已创建或已存在")
    except Exception as e:
        logger.error(f"初始化数据库时出错: {str(e)}")
        raise  # 重新抛出异常，以便在应用启动时捕获
