"""
Factory Method for 2D game objects.

GameObjectFactory.create_object() picks the concrete shape from an ObjectType
and the number of sizes supplied. Shapes take either one size (circle, square,
triangle) or two (rectangle, obround); any other pairing yields a failed
CreationResult.
"""

from collections.abc import Callable
from enum import Enum

from ..exceptions import ErrorContext, UnknownObjectTypeError
from ..results import CreationResult
from ..structured_logging.enhanced_logging_config import get_logger
from .shapes import Circle, GameObject, Obround, Rectangle, Square, Triangle

logger = get_logger(__name__)


class ObjectType(str, Enum):
    """Kinds of game object the factory can create."""

    CIRCLE = "circle"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    OBROUND = "obround"


class GameObjectFactory:  # pylint: disable=too-few-public-methods  # Reason: Factory class with focused responsibility, minimal public interface
    """Factory responsible for instantiating game objects."""

    # Maps (object type, number of sizes) to the shape constructor
    _CONSTRUCTORS: dict[tuple[ObjectType, int], Callable[..., GameObject]] = {
        (ObjectType.CIRCLE, 1): Circle,
        (ObjectType.SQUARE, 1): Square,
        (ObjectType.TRIANGLE, 1): Triangle,
        (ObjectType.RECTANGLE, 2): Rectangle,
        (ObjectType.OBROUND, 2): Obround,
    }

    @classmethod
    def create_object(cls, object_type: ObjectType, *sizes: float) -> CreationResult[GameObject]:
        """
        Create a game object.

        Args:
            object_type: Which shape to create
            *sizes: One size for circle/square/triangle, two for rectangle/obround

        Returns:
            CreationResult: The created object, or UnknownObjectTypeError when the
            type/size pairing is not one the factory makes

        Raises:
            InvalidShapeError: If the sizes describe an impossible shape
        """
        type_name = getattr(object_type, "value", str(object_type))
        constructor = cls._CONSTRUCTORS.get((object_type, len(sizes)))
        if constructor is None:
            logger.warning("No game object for request", object_type=type_name, arity=len(sizes))
            return CreationResult.failure(
                UnknownObjectTypeError(
                    f"Cannot create {type_name} from {len(sizes)} size(s)",
                    ErrorContext(example="factory_method", creator=cls.__name__),
                    object_type=type_name,
                    arity=len(sizes),
                )
            )

        game_object = constructor(*sizes)
        logger.debug("Game object created", object_type=type_name, sizes=sizes)
        return CreationResult.success(game_object)
