import logging
import sys

from sqlalchemy.engine import Engine

from app.core.logging_config import setup_logging
from app.db.base import Base, engine
from app import models  # noqa: F401


# 创建所有表
def create_tables(bind: Engine = engine) -> None:
    Base.metadata.create_all(bind=bind)


# 清空数据库
def reset_db(bind: Engine = engine) -> None:
    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)


if __name__ == "__main__":
    setup_logging()
    if "--reset" in sys.argv:
        reset_db()
        logging.info("数据库表已重建")
    else:
        create_tables()
        logging.info("数据库表已创建")
