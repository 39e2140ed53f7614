# config/logging_config.py
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from config.settings import settings


class JSONFormatter(logging.Formatter):
    """한 줄짜리 JSON 로그 (수집기 파싱용)"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)
        return json.dumps(log_data)


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    level = level or settings.LOG_LEVEL
    fmt = fmt or settings.LOG_FORMAT
    log_level = getattr(logging, level.upper(), logging.INFO)

    if fmt == "json":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    return root_logger
