"""
Logger Setup
------------
loguru configuration for the token service.

Every record passes through a patcher that masks anything shaped like a
compact JWT, so tokens quoted in validation details, URLs or exception
messages never reach a sink in full.
"""

import re
import sys
from typing import Optional

from loguru import logger

from tokenguard.core.config_manager import ApplicationSettings, settings

# header.payload.signature, base64url; headers always start with '{"' -> eyJ
_JWT_PATTERN = re.compile(r"eyJ[\w-]*\.[\w-]*\.[\w-]*")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line} | {message}"
)
LOG_FILE_PATH = "logs/tokenguard_{time:YYYY-MM-DD}.log"


def mask_token(token: str) -> str:
    """Keep only the first and last 8 characters of a token."""
    if len(token) <= 20:
        return "***"
    return f"{token[:8]}...{token[-8:]}"


def mask_tokens(record: dict) -> None:
    """loguru patcher: mask JWTs in the record message in place."""
    record["message"] = _JWT_PATTERN.sub(
        lambda match: mask_token(match.group(0)), record["message"]
    )


def configure_logger(app_settings: Optional[ApplicationSettings] = None) -> None:
    """
    Replace loguru's default handler with the service's sinks.

    Args:
        app_settings: Source of log level and debug flag (module settings when omitted)
    """
    app_settings = app_settings or settings

    logger.remove()
    logger.configure(patcher=mask_tokens)

    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level=app_settings.log_level,
        colorize=True,
        backtrace=True,
        diagnose=app_settings.debug,
    )

    if not app_settings.debug:
        logger.add(
            LOG_FILE_PATH,
            rotation="100 MB",
            retention="14 days",
            level=app_settings.log_level,
            format=FILE_FORMAT,
            backtrace=True,
            diagnose=False,
        )

    logger.info(f"Logger configured with level: {app_settings.log_level}")
