"""Client code for the two builder variants."""

from ..models import Character
from ..structured_logging.enhanced_logging_config import get_logger
from .director import CharacterDirector
from .dice import DiceRoller
from .npc_builder import HeroBuilder, NPCDirector

logger = get_logger(__name__)


def run_npc_builder_example(roller: DiceRoller | None = None) -> Character:
    """Build the hero with the per-field builder and print its sheet."""
    director = NPCDirector(roller)
    builder = HeroBuilder()

    director.create_hero(builder)
    hero = builder.get_npc()

    hero.describe()
    return hero


def run_character_builder_example(roller: DiceRoller | None = None) -> list[Character]:
    """Build a hero, a monster and a villager with the recipe builders and print them."""
    director = CharacterDirector(roller)

    characters = [
        director.create_hero(),
        director.create_monster(),
        director.create_npc(),
    ]
    for character in characters:
        character.describe(title="Character")
        print()

    logger.info("Character builder example finished", names=[c.name for c in characters])
    return characters
