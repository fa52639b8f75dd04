import logging
from enum import StrEnum

LOG_FORMAT_DEBUG = "%(levelname)s - %(message)s - %(pathname)s - %(funcName)s %(lineno)d"
LOG_FORMAT = "%(asctime)s %(levelname)s - %(message)s"

# Third-party loggers that flood DEBUG output with transport details
NOISY_LOGGERS = ("urllib3", "httpx", "httpcore", "grpc", "watchdog")

class LogLevels(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warn = "WARNING"
    error = "ERROR"

LEVEL_MAP = {
    LogLevels.debug: logging.DEBUG,
    LogLevels.info: logging.INFO,
    LogLevels.warn: logging.WARNING,
    LogLevels.error: logging.ERROR,
}

def configure_logging(log_level: str = LogLevels.error) -> int:
    """
    Configure root logging for the API and the UI process.
    Unknown level names fall back to ERROR. Returns the numeric level applied.
    """
    name = str(log_level).upper()

    if name not in {level.value for level in LogLevels}:
        logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT)
        return logging.ERROR

    level = LEVEL_MAP[LogLevels(name)]
    log_format = LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT
    logging.basicConfig(level=level, format=log_format)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))

    return level
