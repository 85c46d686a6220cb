"""
Entry point that runs every creational example in turn.

Each example prints what its products do to standard output; diagnostics and
log records go to standard error and the log file.
"""

from .abstract_factory import run_database_example, run_gui_example
from .builder import get_dice_roller, run_character_builder_example, run_npc_builder_example
from .config import get_config
from .exceptions import create_error_context, handle_exception
from .factory_method import run_factory_method_example
from .structured_logging.enhanced_logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def _banner(title: str) -> None:
    print(f"== {title} ==")


def run_examples(gui_platform: str, database_vendor: str) -> None:
    """Run the five examples in order under a banner each."""
    roller = get_dice_roller()

    _banner("Factory Method: game objects")
    run_factory_method_example()

    _banner("Abstract Factory: GUI widgets")
    run_gui_example(gui_platform)

    _banner("Abstract Factory: database")
    run_database_example(database_vendor)

    _banner("Builder: NPC")
    run_npc_builder_example(roller)

    _banner("Builder: characters")
    run_character_builder_example(roller)


def main() -> int:
    """
    Run all examples with the configured families and dice seed.

    Returns:
        int: 0 when every example finished, 1 when one of them failed
    """
    config = get_config()
    setup_logging(config.logging.to_legacy_dict())
    logger.info(
        "Running creational examples",
        gui_platform=config.family.gui_platform,
        database_vendor=config.family.database_vendor,
        dice_seeded=config.dice.seed is not None,
    )

    try:
        run_examples(config.family.gui_platform, config.family.database_vendor)
    except Exception as e:  # pylint: disable=broad-exception-caught  # Reason: Entry point reports any failure as an exit status
        error = handle_exception(e, create_error_context(example="main", creator="run_examples"))
        logger.error("Creational examples aborted", error_type=type(e).__name__, error=error.message)
        return 1

    logger.info("All creational examples finished")
    return 0
