"""Director for the recipe-based character builders."""

from ..models import Character
from ..structured_logging.enhanced_logging_config import get_logger
from .character_builder import CharacterBuilder, HeroCharacterBuilder, MonsterCharacterBuilder, VillagerBuilder
from .dice import DiceRoller, get_dice_roller

logger = get_logger(__name__)


class CharacterDirector:
    """
    Drives a CharacterBuilder through the fixed build sequence.

    The director keeps only its dice roller; every character it produces is
    handed straight back to the caller.
    """

    def __init__(self, roller: DiceRoller | None = None) -> None:
        self._roller = roller or get_dice_roller()

    def construct(self, builder: CharacterBuilder) -> Character:
        builder.reset()
        builder.build_identity()
        builder.build_equipment()
        builder.build_character_attributes(self._roller)
        character = builder.get_character()
        logger.info("Character constructed", name=character.name, builder=type(builder).__name__)
        return character

    def create_hero(self) -> Character:
        return self.construct(HeroCharacterBuilder())

    def create_monster(self) -> Character:
        return self.construct(MonsterCharacterBuilder())

    def create_npc(self) -> Character:
        return self.construct(VillagerBuilder())
