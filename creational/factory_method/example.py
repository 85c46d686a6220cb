"""Client code for the game object factory."""

import sys

from ..exceptions import InvalidShapeError
from ..structured_logging.enhanced_logging_config import get_logger
from .factory import GameObjectFactory, ObjectType
from .shapes import GameObject

logger = get_logger(__name__)


def run_factory_method_example() -> list[GameObject]:
    """
    Create one of each shape, then draw and collide them.

    Returns:
        The objects that were created, in the order they were exercised
    """
    circle = GameObjectFactory.create_object(ObjectType.CIRCLE, 5.0).unwrap()
    square = GameObjectFactory.create_object(ObjectType.SQUARE, 5.0).unwrap()
    triangle = GameObjectFactory.create_object(ObjectType.TRIANGLE, 5.0).unwrap()
    rectangle = GameObjectFactory.create_object(ObjectType.RECTANGLE, 10.0, 2.0).unwrap()

    obround: GameObject | None = None
    try:
        obround = GameObjectFactory.create_object(ObjectType.OBROUND, 9.0, 2.0).unwrap()
    except InvalidShapeError as e:
        print(f"Failed to create obround: {e}", file=sys.stderr)

    created = [circle, triangle, square, rectangle]
    if obround is not None:
        created.append(obround)

    for game_object in created:
        game_object.draw()
        game_object.collide()

    logger.info("Factory method example finished", objects=[type(obj).__name__ for obj in created])
    return created
