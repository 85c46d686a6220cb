"""
Builder with one setter per field.

NPCDirector.create_hero() drives an NPCBuilder through every setter in a fixed
order. The builder keeps the in-progress fields; get_npc() hands back a frozen
Character and starts a new blank one.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..exceptions import BuilderStateError, ErrorContext
from ..models import Character
from ..structured_logging.enhanced_logging_config import get_logger
from .dice import DiceRoller, get_dice_roller

logger = get_logger(__name__)


class NPCBuilder(ABC):
    """Interface for builders that set an NPC's fields one at a time."""

    @abstractmethod
    def reset(self) -> None:
        """Discard any in-progress NPC and start a blank one."""

    @abstractmethod
    def set_name(self, name: str) -> None:
        pass

    @abstractmethod
    def set_health(self, health: int) -> None:
        pass

    @abstractmethod
    def set_armor(self, armor: str) -> None:
        pass

    @abstractmethod
    def set_weapon(self, weapon: str) -> None:
        pass

    @abstractmethod
    def set_magic(self, magic: str) -> None:
        pass

    @abstractmethod
    def set_strength(self, strength: int) -> None:
        pass

    @abstractmethod
    def set_intelligence(self, intelligence: int) -> None:
        pass

    @abstractmethod
    def set_wisdom(self, wisdom: int) -> None:
        pass

    @abstractmethod
    def set_dexterity(self, dexterity: int) -> None:
        pass

    @abstractmethod
    def set_constitution(self, constitution: int) -> None:
        pass

    @abstractmethod
    def set_charisma(self, charisma: int) -> None:
        pass

    @abstractmethod
    def get_npc(self) -> Character:
        """Return the finished NPC and reset the builder."""


class HeroBuilder(NPCBuilder):
    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def reset(self) -> None:
        self._fields = {}

    def set_name(self, name: str) -> None:
        self._fields["name"] = name

    def set_health(self, health: int) -> None:
        self._fields["health"] = health

    def set_armor(self, armor: str) -> None:
        self._fields["armor"] = armor

    def set_weapon(self, weapon: str) -> None:
        self._fields["weapon"] = weapon

    def set_magic(self, magic: str) -> None:
        self._fields["magic"] = magic

    def set_strength(self, strength: int) -> None:
        self._fields["strength"] = strength

    def set_intelligence(self, intelligence: int) -> None:
        self._fields["intelligence"] = intelligence

    def set_wisdom(self, wisdom: int) -> None:
        self._fields["wisdom"] = wisdom

    def set_dexterity(self, dexterity: int) -> None:
        self._fields["dexterity"] = dexterity

    def set_constitution(self, constitution: int) -> None:
        self._fields["constitution"] = constitution

    def set_charisma(self, charisma: int) -> None:
        self._fields["charisma"] = charisma

    def get_npc(self) -> Character:
        """
        Return the finished NPC and reset the builder.

        Raises:
            BuilderStateError: If any field has not been set since the last reset
            pydantic.ValidationError: If a field holds an invalid value
        """
        missing = Character.missing_fields(self._fields)
        if missing:
            raise BuilderStateError(
                f"Cannot retrieve an NPC with unset fields: {', '.join(missing)}",
                ErrorContext(example="npc_builder", creator=type(self).__name__),
                builder=type(self).__name__,
                missing=missing,
            )

        npc = Character(**self._fields)
        self.reset()
        logger.debug("NPC built", name=npc.name)
        return npc


class NPCDirector:  # pylint: disable=too-few-public-methods  # Reason: Director with focused responsibility, minimal public interface
    """Runs canned NPC recipes against a builder. Holds no product."""

    def __init__(self, roller: DiceRoller | None = None) -> None:
        self._roller = roller or get_dice_roller()

    def create_hero(self, builder: NPCBuilder) -> None:
        roll = self._roller.roll
        builder.reset()
        builder.set_name("Link")
        builder.set_health(3)
        builder.set_armor("Green Tunic")
        builder.set_weapon("Fighter Sword")
        builder.set_magic("Lantern")
        builder.set_strength(roll(9, 2))
        builder.set_intelligence(roll(6, 3))
        builder.set_wisdom(roll(3, 6))
        builder.set_dexterity(roll(9, 2))
        builder.set_constitution(roll(9, 2))
        builder.set_charisma(roll(3, 6))
        logger.info("Hero recipe applied", builder=type(builder).__name__)
