"""
Character model produced by the builder examples.

A Character is frozen once built and every field is required: builders
accumulate plain field values and only validate them into a Character when the
product is retrieved.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AbilityType(str, Enum):
    """The six ability scores."""

    STR = "strength"
    INT = "intelligence"
    WIS = "wisdom"
    DEX = "dexterity"
    CON = "constitution"
    CHA = "charisma"


ABILITY_LABELS = {
    AbilityType.STR: "STR",
    AbilityType.INT: "INT",
    AbilityType.WIS: "WIS",
    AbilityType.DEX: "DEX",
    AbilityType.CON: "CON",
    AbilityType.CHA: "CHA",
}


class Character(BaseModel):
    """An RPG character sheet."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="Character name")
    health: int = Field(ge=0, description="Hit points")

    # Equipment
    armor: str = Field(description="Worn armor")
    weapon: str = Field(description="Wielded weapon")
    magic: str = Field(description="Magic item or spell")

    # Ability scores
    strength: int = Field(ge=0, description="Physical power")
    intelligence: int = Field(ge=0, description="Reasoning and memory")
    wisdom: int = Field(ge=0, description="Perception and insight")
    dexterity: int = Field(ge=0, description="Agility and reflexes")
    constitution: int = Field(ge=0, description="Endurance")
    charisma: int = Field(ge=0, description="Force of personality")

    @classmethod
    def missing_fields(cls, values: Mapping[str, Any]) -> list[str]:
        """Return the fields, in declaration order, that have no value in `values`."""
        return [name for name in cls.model_fields if name not in values]

    def ability(self, ability: AbilityType) -> int:
        return getattr(self, AbilityType(ability).value)

    def info(self, title: str = "NPC") -> list[str]:
        """Return the character sheet as printable lines."""
        lines = [
            f"{title} {self.name}:",
            f"Health: {self.health}",
            f"Armor: {self.armor}",
            f"Weapon: {self.weapon}",
            f"Magic: {self.magic}",
        ]
        lines.extend(f"{ABILITY_LABELS[ability]}: {self.ability(ability)}" for ability in AbilityType)
        return lines

    def describe(self, title: str = "NPC") -> None:
        for line in self.info(title):
            print(line)
