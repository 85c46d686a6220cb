"""
Structured logging package for the creational examples.

All imports should use explicit paths like
'from creational.structured_logging.enhanced_logging_config import get_logger'.

The directory is named 'structured_logging' rather than 'logging' so it never
shadows the standard library module.
"""

__all__: list[str] = []
