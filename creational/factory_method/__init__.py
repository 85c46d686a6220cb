"""Factory Method example: 2D game objects with a sprite and a collider."""

from .components import BasicCollider, BasicSprite, Collider, Sprite
from .example import run_factory_method_example
from .factory import GameObjectFactory, ObjectType
from .shapes import Circle, GameObject, Obround, Rectangle, Square, Triangle

__all__ = [
    "BasicCollider",
    "BasicSprite",
    "Circle",
    "Collider",
    "GameObject",
    "GameObjectFactory",
    "ObjectType",
    "Obround",
    "Rectangle",
    "Sprite",
    "Square",
    "Triangle",
    "run_factory_method_example",
]
