"""
Logging processors for structlog event processing.

This module provides processors for sanitizing sensitive data and tagging
entries with the example that produced them.
"""

import re
from typing import Any

# Connection settings a database example could log
SENSITIVE_PATTERNS = [
    r"\bpassword\b",
    r"\bsecret\b",
    r"\bdsn\b",
]


def sanitize_sensitive_data(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive data from log entries.

    Database examples may log connection settings; anything that looks like a
    credential is replaced with "[REDACTED]" before rendering.

    Args:
        _logger: Logger instance (unused)
        _name: Logger name (unused)
        event_dict: Event dictionary to sanitize

    Returns:
        Sanitized event dictionary
    """

    def sanitize_dict(d: dict[str, Any]) -> dict[str, Any]:
        sanitized: dict[str, Any] = {}
        for key, value in d.items():
            if isinstance(value, dict):
                sanitized[key] = sanitize_dict(value)
                continue
            key_lower = key.lower()
            if any(re.search(pattern, key_lower) for pattern in SENSITIVE_PATTERNS):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = value
        return sanitized

    return sanitize_dict(event_dict)


def add_pattern_name(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Tag entries with the creational pattern that emitted them.

    The pattern is derived from the logger name, e.g.
    "creational.builder.director" -> "builder".
    """
    logger_name = event_dict.get("logger") or ""
    if "pattern" not in event_dict and logger_name.startswith("creational."):
        parts = logger_name.split(".")
        if len(parts) > 2:
            event_dict["pattern"] = parts[1]
    return event_dict
