"""
Abstract Factory for database connectivity.

Abstract factory:  DatabaseFactory
Abstract products: DatabaseConnection, DatabaseCommand
Concrete families: MySQL, PostgreSQL, Oracle

Connections are context managers, so a connection opened inside a with block
is closed when the block exits.
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..exceptions import ErrorContext, UnknownFamilyError
from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


class DatabaseVendor(str, Enum):
    """Database families."""

    MYSQL = "mysql"
    POSTGRES = "postgres"
    ORACLE = "oracle"


class DatabaseConnection(ABC):
    vendor: DatabaseVendor
    display_name: str

    def __init__(self) -> None:
        self.is_connected = False

    @abstractmethod
    def connect(self) -> None:
        """Open the connection."""

    def close(self) -> None:
        if self.is_connected:
            self.is_connected = False
            logger.info("Database connection closed", vendor=self.vendor.value)

    def __enter__(self) -> "DatabaseConnection":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class DatabaseCommand(ABC):
    vendor: DatabaseVendor
    display_name: str

    def __init__(self) -> None:
        self.history: list[str] = []

    @abstractmethod
    def execute(self, query: str) -> None:
        """Run a query against the database."""


class _StubConnection(DatabaseConnection):
    """Stands in for the vendor driver: records state and reports it."""

    def connect(self) -> None:
        self.is_connected = True
        logger.info("Database connection opened", vendor=self.vendor.value)
        print(f"{self.display_name} connection opened")


class _StubCommand(DatabaseCommand):
    def execute(self, query: str) -> None:
        self.history.append(query)
        logger.info("Database command executed", vendor=self.vendor.value, query=query)
        print(f"{self.display_name} executing: {query}")


class MySQLConnection(_StubConnection):
    vendor = DatabaseVendor.MYSQL
    display_name = "MySQL"


class MySQLCommand(_StubCommand):
    vendor = DatabaseVendor.MYSQL
    display_name = "MySQL"


class PostgreSQLConnection(_StubConnection):
    vendor = DatabaseVendor.POSTGRES
    display_name = "PostgreSQL"


class PostgreSQLCommand(_StubCommand):
    vendor = DatabaseVendor.POSTGRES
    display_name = "PostgreSQL"


class OracleConnection(_StubConnection):
    vendor = DatabaseVendor.ORACLE
    display_name = "Oracle"


class OracleCommand(_StubCommand):
    vendor = DatabaseVendor.ORACLE
    display_name = "Oracle"


class DatabaseFactory(ABC):
    vendor: DatabaseVendor

    @abstractmethod
    def create_connection(self) -> DatabaseConnection:
        pass

    @abstractmethod
    def create_command(self) -> DatabaseCommand:
        pass


class MySQLFactory(DatabaseFactory):
    vendor = DatabaseVendor.MYSQL

    def create_connection(self) -> DatabaseConnection:
        return MySQLConnection()

    def create_command(self) -> DatabaseCommand:
        return MySQLCommand()


class PostgreSQLFactory(DatabaseFactory):
    vendor = DatabaseVendor.POSTGRES

    def create_connection(self) -> DatabaseConnection:
        return PostgreSQLConnection()

    def create_command(self) -> DatabaseCommand:
        return PostgreSQLCommand()


class OracleFactory(DatabaseFactory):
    vendor = DatabaseVendor.ORACLE

    def create_connection(self) -> DatabaseConnection:
        return OracleConnection()

    def create_command(self) -> DatabaseCommand:
        return OracleCommand()


_DATABASE_FACTORIES: dict[DatabaseVendor, type[DatabaseFactory]] = {
    DatabaseVendor.MYSQL: MySQLFactory,
    DatabaseVendor.POSTGRES: PostgreSQLFactory,
    DatabaseVendor.ORACLE: OracleFactory,
}


def get_database_factory(vendor: DatabaseVendor | str = DatabaseVendor.MYSQL) -> DatabaseFactory:
    """
    Return the database factory for a vendor.

    Raises:
        UnknownFamilyError: If no factory exists for the vendor
    """
    try:
        selected = DatabaseVendor(vendor)
    except ValueError as exc:
        raise UnknownFamilyError(
            f"No database factory for vendor '{vendor}'",
            ErrorContext(example="database", creator="get_database_factory"),
            family=str(vendor),
        ) from exc

    factory = _DATABASE_FACTORIES[selected]()
    logger.debug("Database factory selected", vendor=selected.value, factory=type(factory).__name__)
    return factory
