"""
Structlog-based logging configuration for the creational examples.

Standard output belongs to the examples themselves (each product prints what it
does), so every log record is routed through the standard library logging
module to stderr and, unless disabled, to a per-environment log file.

CORRECT USAGE:
    from creational.structured_logging.enhanced_logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("Game object created", object_type="circle", sizes=(5.0,))
"""

# pylint: disable=too-few-public-methods  # Reason: Logging configuration classes with focused responsibility, minimal public interface

import json
import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.stdlib import BoundLogger, LoggerFactory

from creational.structured_logging.logging_processors import add_pattern_name, sanitize_sensitive_data
from creational.structured_logging.logging_utilities import (
    detect_environment,
    ensure_log_directory,
    resolve_log_base,
)

LOG_FILE_NAME = "creational.log"


class _LoggingState:  # pylint: disable=too-few-public-methods  # Reason: State container class with focused responsibility, minimal public interface
    """State container for logging initialization to avoid global statements."""

    initialized: bool = False
    signature: str | None = None


_logging_state = _LoggingState()


def _configure_default_structlog() -> None:
    """
    Route structlog through stdlib logging until setup_logging() runs.

    structlog's own default prints to stdout, which would interleave log lines
    with example output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(),
        ],
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    _configure_default_structlog()


def _select_renderer(log_format: str) -> Any:
    """Pick the final structlog renderer for a configured log format."""
    renderers = {
        "json": structlog.processors.JSONRenderer,
        "human": structlog.processors.KeyValueRenderer,
        "colored": structlog.dev.ConsoleRenderer,
    }
    renderer_cls = renderers.get(log_format, structlog.processors.KeyValueRenderer)
    return renderer_cls()


def _add_handler(root_logger: logging.Logger, handler: logging.Handler) -> None:
    handler._creational_handler = True  # type: ignore[attr-defined]
    root_logger.addHandler(handler)


def remove_handlers() -> None:
    """Detach and close the handlers installed by setup_logging(), leaving any others in place."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_creational_handler", False):
            root_logger.removeHandler(handler)
            handler.close()


def _configure_stdlib_handlers(environment: str, log_level: str, log_config: dict[str, Any]) -> None:
    """Attach stderr and file handlers to the root logger, replacing ones from an earlier setup."""
    root_logger = logging.getLogger()
    remove_handlers()

    formatter = logging.Formatter("%(message)s")

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    _add_handler(root_logger, stderr_handler)

    if not log_config.get("disable_logging", False):
        log_path = resolve_log_base(log_config.get("log_base", "logs")) / environment / LOG_FILE_NAME
        ensure_log_directory(log_path)
        try:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as e:
            root_logger.warning("Could not open log file %s: %s", log_path, e)
        else:
            file_handler.setFormatter(formatter)
            _add_handler(root_logger, file_handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def configure_structlog(
    environment: str | None = None,
    log_level: str = "INFO",
    log_config: dict[str, Any] | None = None,
) -> None:
    """
    Configure structlog on top of standard library logging.

    Args:
        environment: Environment name (auto-detected if None)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_config: Logging configuration dictionary
    """
    if environment is None:
        environment = detect_environment()
    log_config = log_config or {}

    processors = [
        # Security first - sanitize sensitive data
        sanitize_sensitive_data,
        merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        add_pattern_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _select_renderer(log_config.get("format", "human")),
    ]

    _configure_stdlib_handlers(environment, log_level, log_config)

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging(log_config: dict[str, Any], *, force_reconfigure: bool = False) -> None:
    """
    Set up logging from a logging configuration dictionary.

    Args:
        log_config: Logging configuration, as produced by LoggingConfig.to_legacy_dict()
        force_reconfigure: When True, tear down existing handlers before reconfiguring
    """
    config_signature = json.dumps(log_config, sort_keys=True, default=str)

    if _logging_state.initialized and not force_reconfigure:
        get_logger("creational.structured_logging.setup").debug(
            "setup_logging skipped; logging system already initialized",
            config_signature=_logging_state.signature,
        )
        return

    environment = log_config.get("environment") or detect_environment()
    log_level = log_config.get("level", "INFO")

    configure_structlog(environment, log_level, log_config)

    get_logger("creational.structured_logging.setup").info(
        "Logging system initialized",
        environment=environment,
        log_level=log_level,
        log_base=log_config.get("log_base", "logs"),
        file_logging=not log_config.get("disable_logging", False),
    )

    _logging_state.initialized = True
    _logging_state.signature = config_signature


def reset_logging_state() -> None:
    """Forget that logging was initialized so the next setup_logging() call reconfigures."""
    _logging_state.initialized = False
    _logging_state.signature = None


def get_logger(name: str) -> Any:  # Returns BoundLogger but typed as Any for flexibility
    """
    Get a Structlog logger with the specified name.

    This is the public API for obtaining loggers. All application code
    should use this function rather than calling structlog.get_logger()
    directly.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured Structlog logger instance
    """
    return structlog.get_logger(name)
