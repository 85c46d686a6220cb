"""
Dice rolling for character generation.

roll() sums `quantity` independent draws of a `sides`-sided die. A DiceRoller
wraps a single random.Random so one seeded generator can be shared by every
director in the process, or swapped for a deterministic one in tests.
"""

import random
import threading
from dataclasses import dataclass

from ..config import get_config
from ..exceptions import ErrorContext, InvalidDiceError
from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


def roll(quantity: int, sides: int, rng: random.Random | None = None) -> int:
    """
    Roll `quantity` dice with `sides` faces and return the total.

    Args:
        quantity: Number of dice (0 rolls nothing and returns 0)
        sides: Faces per die, at least 1
        rng: Generator to draw from; the module-level random generator if None

    Returns:
        int: A total in [quantity, quantity * sides]

    Raises:
        InvalidDiceError: If quantity is negative or sides is less than 1
    """
    if quantity < 0 or sides < 1:
        raise InvalidDiceError(
            f"Cannot roll {quantity}d{sides}",
            ErrorContext(example="builder", creator="roll"),
            quantity=quantity,
            sides=sides,
        )

    draw = rng.randint if rng is not None else random.randint
    return sum(draw(1, sides) for _ in range(quantity))


@dataclass(frozen=True)
class AbilityRoll:
    """An ability score recipe: offset + quantity d sides."""

    offset: int
    quantity: int
    sides: int

    @property
    def minimum(self) -> int:
        return self.offset + self.quantity

    @property
    def maximum(self) -> int:
        return self.offset + self.quantity * self.sides

    def __str__(self) -> str:
        if self.offset:
            return f"{self.offset}+{self.quantity}d{self.sides}"
        return f"{self.quantity}d{self.sides}"


class DiceRoller:
    """Rolls dice from one owned random generator."""

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        """
        Args:
            rng: Generator to use; takes precedence over seed
            seed: Seed for a new generator when rng is not given
        """
        self._rng = rng if rng is not None else random.Random(seed)

    def roll(self, quantity: int, sides: int) -> int:
        return roll(quantity, sides, self._rng)

    def roll_ability(self, ability_roll: AbilityRoll) -> int:
        return ability_roll.offset + self.roll(ability_roll.quantity, ability_roll.sides)


class _RollerHolder:  # pylint: disable=too-few-public-methods  # Reason: Holder class with focused responsibility, minimal public interface
    roller: DiceRoller | None = None


_roller_holder = _RollerHolder()
_roller_lock = threading.Lock()


def get_dice_roller() -> DiceRoller:
    """
    Return the process-wide dice roller, seeded from DICE_SEED on first use.

    Returns:
        DiceRoller: The shared roller
    """
    with _roller_lock:
        if _roller_holder.roller is None:
            seed = get_config().dice.seed
            _roller_holder.roller = DiceRoller(seed=seed)
            logger.debug("Dice roller created", seeded=seed is not None)
        return _roller_holder.roller


def reset_dice_roller() -> None:
    """Drop the shared roller so the next get_dice_roller() call re-reads the config."""
    with _roller_lock:
        _roller_holder.roller = None
