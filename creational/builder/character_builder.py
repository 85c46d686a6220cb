"""
Builder with a collapsed attribute step.

Instead of one setter per ability, build_character_attributes() rolls all six
ability scores at once from the builder's recipe. Each concrete builder makes
one kind of character (hero, monster, villager).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..exceptions import BuilderStateError, ErrorContext
from ..models import AbilityType, Character
from ..structured_logging.enhanced_logging_config import get_logger
from .dice import AbilityRoll, DiceRoller

logger = get_logger(__name__)


@dataclass(frozen=True)
class CharacterRecipe:
    """Literal fields plus one dice recipe per ability."""

    name: str
    health: int
    armor: str
    weapon: str
    magic: str
    abilities: dict[AbilityType, AbilityRoll]

    def ability_range(self, ability: AbilityType) -> tuple[int, int]:
        ability_roll = self.abilities[ability]
        return ability_roll.minimum, ability_roll.maximum


HERO_RECIPE = CharacterRecipe(
    name="Link",
    health=3,
    armor="Green Tunic",
    weapon="Fighter Sword",
    magic="Lantern",
    abilities={
        AbilityType.STR: AbilityRoll(12, 1, 6),
        AbilityType.INT: AbilityRoll(6, 2, 4),
        AbilityType.WIS: AbilityRoll(6, 2, 4),
        AbilityType.DEX: AbilityRoll(10, 1, 8),
        AbilityType.CON: AbilityRoll(9, 1, 6),
        AbilityType.CHA: AbilityRoll(0, 3, 6),
    },
)

MONSTER_RECIPE = CharacterRecipe(
    name="Ganon",
    health=20,
    armor="Dark Plate",
    weapon="Trident",
    magic="Dark Magic",
    abilities={
        AbilityType.STR: AbilityRoll(14, 1, 4),
        AbilityType.INT: AbilityRoll(8, 1, 6),
        AbilityType.WIS: AbilityRoll(0, 3, 6),
        AbilityType.DEX: AbilityRoll(0, 2, 6),
        AbilityType.CON: AbilityRoll(14, 1, 4),
        AbilityType.CHA: AbilityRoll(0, 1, 6),
    },
)

VILLAGER_RECIPE = CharacterRecipe(
    name="Villager",
    health=1,
    armor="Peasant Clothes",
    weapon="Walking Stick",
    magic="None",
    abilities={ability: AbilityRoll(0, 3, 6) for ability in AbilityType},
)


class CharacterBuilder(ABC):
    """Interface for builders that assemble a character in three steps."""

    @abstractmethod
    def reset(self) -> None:
        """Discard any in-progress character and start a blank one."""

    @abstractmethod
    def build_identity(self) -> None:
        """Set name and health."""

    @abstractmethod
    def build_equipment(self) -> None:
        """Set armor, weapon and magic."""

    @abstractmethod
    def build_character_attributes(self, roller: DiceRoller) -> None:
        """Roll all six ability scores."""

    @abstractmethod
    def get_character(self) -> Character:
        """Return the finished character and reset the builder."""


class RecipeCharacterBuilder(CharacterBuilder):
    """Builds characters from a CharacterRecipe."""

    recipe: CharacterRecipe

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def reset(self) -> None:
        self._fields = {}

    def build_identity(self) -> None:
        self._fields["name"] = self.recipe.name
        self._fields["health"] = self.recipe.health

    def build_equipment(self) -> None:
        self._fields["armor"] = self.recipe.armor
        self._fields["weapon"] = self.recipe.weapon
        self._fields["magic"] = self.recipe.magic

    def build_character_attributes(self, roller: DiceRoller) -> None:
        for ability, ability_roll in self.recipe.abilities.items():
            self._fields[ability.value] = roller.roll_ability(ability_roll)

    def get_character(self) -> Character:
        """
        Return the finished character and reset the builder.

        Raises:
            BuilderStateError: If any build step has not run since the last reset
        """
        missing = Character.missing_fields(self._fields)
        if missing:
            raise BuilderStateError(
                f"Cannot retrieve an unfinished character; unset fields: {', '.join(missing)}",
                ErrorContext(example="character_builder", creator=type(self).__name__),
                builder=type(self).__name__,
                missing=missing,
            )

        character = Character(**self._fields)
        self.reset()
        logger.debug("Character built", name=character.name, builder=type(self).__name__)
        return character


class HeroCharacterBuilder(RecipeCharacterBuilder):
    recipe = HERO_RECIPE


class MonsterCharacterBuilder(RecipeCharacterBuilder):
    recipe = MONSTER_RECIPE


class VillagerBuilder(RecipeCharacterBuilder):
    recipe = VILLAGER_RECIPE
