import logging
import os
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler

def get_logger(
    name: str = "spoilerlog",
    level=logging.INFO,
    log_dir=None,
    rotate="none",       # day / size / none
    max_bytes=10*1024*1024,  # 10MB
    backup_count=7,
):
    """
    通用 logger
    - 始终输出到控制台
    - 指定 log_dir 时额外写文件, 按 rotate 策略滚动
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    # 未知级别名 getLevelName 返回 "Level XXX", 退回 INFO
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 避免重复添加 handler
    if logger.handlers:
        return logger

    # 日志格式
    fmt = logging.Formatter(
        "[%(asctime)s][%(levelname)s][%(filename)s:%(lineno)d] %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )

    # === 控制台输出 ===
    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)

    if not log_dir:
        return logger

    # === 文件输出 ===
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, f"{name}.log")

    if rotate == "day":
        file_handler = TimedRotatingFileHandler(
            log_file, when="midnight", interval=1, backupCount=backup_count,
            encoding="utf-8"
        )

    elif rotate == "size":
        file_handler = RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count,
            encoding="utf-8"
        )

    else:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")

    file_handler.setFormatter(fmt)
    logger.addHandler(file_handler)

    return logger
