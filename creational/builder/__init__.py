"""Builder examples: RPG characters assembled by builders under a director."""

from .character_builder import (
    HERO_RECIPE,
    MONSTER_RECIPE,
    VILLAGER_RECIPE,
    CharacterBuilder,
    CharacterRecipe,
    HeroCharacterBuilder,
    MonsterCharacterBuilder,
    RecipeCharacterBuilder,
    VillagerBuilder,
)
from .dice import AbilityRoll, DiceRoller, get_dice_roller, reset_dice_roller, roll
from .director import CharacterDirector
from .example import run_character_builder_example, run_npc_builder_example
from .npc_builder import HeroBuilder, NPCBuilder, NPCDirector

__all__ = [
    "HERO_RECIPE",
    "MONSTER_RECIPE",
    "VILLAGER_RECIPE",
    "AbilityRoll",
    "CharacterBuilder",
    "CharacterDirector",
    "CharacterRecipe",
    "DiceRoller",
    "HeroBuilder",
    "HeroCharacterBuilder",
    "MonsterCharacterBuilder",
    "NPCBuilder",
    "NPCDirector",
    "RecipeCharacterBuilder",
    "VillagerBuilder",
    "get_dice_roller",
    "reset_dice_roller",
    "roll",
    "run_character_builder_example",
    "run_npc_builder_example",
]
