"""Abstract Factory examples: cross-platform GUI widgets and database connectors."""

from .database import (
    DatabaseCommand,
    DatabaseConnection,
    DatabaseFactory,
    DatabaseVendor,
    MySQLFactory,
    OracleFactory,
    PostgreSQLFactory,
    get_database_factory,
)
from .example import run_database_example, run_gui_example
from .gui import (
    Button,
    Dialog,
    GUIFactory,
    LinuxFactory,
    MacOSFactory,
    Menu,
    Platform,
    WindowsFactory,
    get_gui_factory,
)

__all__ = [
    "Button",
    "DatabaseCommand",
    "DatabaseConnection",
    "DatabaseFactory",
    "DatabaseVendor",
    "Dialog",
    "GUIFactory",
    "LinuxFactory",
    "MacOSFactory",
    "Menu",
    "MySQLFactory",
    "OracleFactory",
    "Platform",
    "PostgreSQLFactory",
    "WindowsFactory",
    "get_database_factory",
    "get_gui_factory",
    "run_database_example",
    "run_gui_example",
]
