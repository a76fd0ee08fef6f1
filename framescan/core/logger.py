"""
ライブラリ全体のログ管理（ローテーション対応）

各モジュールは logging.getLogger(__name__) で "framescan" 配下のロガーを持ち、
ハンドラは Decoder 生成時など最初に get_logger() が呼ばれた時点で一度だけ付ける。
"""
import logging
from logging.handlers import RotatingFileHandler
import os

from framescan.config import settings

LOGGER_NAME = "framescan"

_configured = False


def get_logger(level=None):
    """
    level: 未指定なら settings.LOG_LEVEL
    """
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    if _configured:
        return logger

    logger.setLevel(level or settings.LOG_LEVEL)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")

    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE_BASENAME)
        handler = RotatingFileHandler(
            log_path, maxBytes=settings.LOG_MAX_BYTES, backupCount=settings.LOG_BACKUP_COUNT, encoding="utf-8"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # コンソールにも出す
    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    _configured = True
    return logger


def reset_logger():
    """付けたハンドラを外し、次の get_logger() で設定し直す"""
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    _configured = False
