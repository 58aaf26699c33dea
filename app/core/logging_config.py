import logging
import os
import sys
from datetime import datetime
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_to_file: bool = False) -> Optional[str]:
    """
    配置根日志记录器

    根记录器已有处理器时不再重复配置（与 logging.basicConfig 行为一致），
    因此 run.py 先配置的文件日志不会被 app.main 导入时覆盖。

    参数:
        log_to_file: 是否额外写入 LOG_DIR 下按启动时间命名的日志文件

    返回:
        Optional[str]: 日志文件路径，未写文件或已配置过时为 None
    """
    root = logging.getLogger()
    if root.handlers:
        return None

    root.setLevel(settings.LOG_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT)

    # 控制台处理器
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if not log_to_file:
        return None

    # 文件处理器，按启动时间生成日志文件
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_filename = os.path.join(settings.LOG_DIR, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
    file_handler = logging.FileHandler(log_filename, encoding="utf-8")
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    return log_filename
