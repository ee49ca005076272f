"""
Logging configuration for the Emplyo API.

Console output for operators, a rotating file for post-mortems.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

SENSITIVE_KEYS = (
    "password", "token", "secret", "key", "authorization",
    "llm_gateway_api_key", "database_url",
)


def setup_logging(log_level: str = "INFO", log_dir: str = "logs"):
    """
    Configure the root logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating log file
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    directory = Path(log_dir)
    directory.mkdir(exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))

    file_handler = RotatingFileHandler(
        directory / "emplyo.log",
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    # Chatty third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


def sanitize_log_data(data: dict) -> dict:
    """
    Return a copy of ``data`` with secret-looking values redacted.

    Matching is by key name, case-insensitive.
    """
    sanitized = data.copy()
    for key in sanitized:
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
    return sanitized
