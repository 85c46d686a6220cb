"""Client code for the GUI and database factories."""

from ..config import get_config
from ..structured_logging.enhanced_logging_config import get_logger
from .database import DatabaseCommand, DatabaseVendor, get_database_factory
from .gui import Platform, Widget, get_gui_factory

logger = get_logger(__name__)

EXAMPLE_QUERY = "SELECT * FROM some_table"


def run_gui_example(platform: Platform | str | None = None) -> list[Widget]:
    """
    Build and draw one button, menu and dialog from a single platform family.

    Args:
        platform: Widget family; defaults to the configured FAMILY_GUI_PLATFORM

    Returns:
        The widgets that were drawn
    """
    if platform is None:
        platform = get_config().family.gui_platform

    factory = get_gui_factory(platform)
    widgets: list[Widget] = [factory.create_button(), factory.create_menu(), factory.create_dialog()]

    for widget in widgets:
        widget.draw()

    logger.info("GUI example finished", platform=factory.platform.value)
    return widgets


def run_database_example(vendor: DatabaseVendor | str | None = None) -> DatabaseCommand:
    """
    Connect to a database family and run the example query.

    Args:
        vendor: Database family; defaults to the configured FAMILY_DATABASE_VENDOR

    Returns:
        The command object, whose history holds the executed query
    """
    if vendor is None:
        vendor = get_config().family.database_vendor

    factory = get_database_factory(vendor)
    command = factory.create_command()

    with factory.create_connection():
        command.execute(EXAMPLE_QUERY)

    logger.info("Database example finished", vendor=factory.vendor.value)
    return command
