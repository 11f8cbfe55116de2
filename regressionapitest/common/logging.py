from __future__ import annotations
import logging, json, sys, time
from .config import LOG_LEVEL, LOG_FILE, LOG_FORMAT, APP_NAME

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

TEXT_FORMAT = "%(levelname_prefix)s%(asctime)s %(filename)s:%(lineno)d: %(message)s"
TEXT_DATEFMT = "%Y/%m/%d %H:%M:%S"

class TextFormatter(logging.Formatter):
    """``INFO:    2024/01/23 01:23:23 runner.py:42: message``"""

    def __init__(self):
        super().__init__(TEXT_FORMAT, TEXT_DATEFMT)

    def format(self, record: logging.LogRecord) -> str:
        record.levelname_prefix = f"{record.levelname}:".ljust(9)
        return super().format(record)

class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if hasattr(record, "extra"):
            payload["extra"] = record.extra
        return json.dumps(payload, ensure_ascii=False)

def parse_level(name: str) -> int:
    name = (name or "").strip().upper()
    if name == "TRACE":
        return TRACE
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO

def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(f"{APP_NAME}.{name}" if name else APP_NAME)

def setup_logging(level: str = LOG_LEVEL, log_file: str = LOG_FILE, fmt: str = LOG_FORMAT) -> logging.Logger:
    """
    Route the app logger to ``log_file`` ("stdout" for standard output).
    With a real file, errors are also echoed on stdout. Raises OSError if
    the file cannot be opened.
    """
    lvl = parse_level(level)
    formatter = JsonFormatter() if fmt.lower() == "json" else TextFormatter()

    logger = get_logger()
    logger.setLevel(lvl)
    # Replace handlers from a previous call
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    if log_file.lower() == "stdout":
        handlers = [logging.StreamHandler(sys.stdout)]
    else:
        echo = logging.StreamHandler(sys.stdout)
        echo.setLevel(logging.ERROR)
        handlers = [logging.FileHandler(log_file, mode="a", encoding="utf-8"), echo]

    for h in handlers:
        if h.level == logging.NOTSET:
            h.setLevel(lvl)
        h.setFormatter(formatter)
        logger.addHandler(h)
    logger.propagate = False
    return logger
