"""Data models shared by the examples."""

from .character import ABILITY_LABELS, AbilityType, Character

__all__ = ["ABILITY_LABELS", "AbilityType", "Character"]
