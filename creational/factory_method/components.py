"""Sprite and collider components shared by every game object."""

from abc import ABC, abstractmethod


class Sprite(ABC):
    """Something that can be drawn."""

    @abstractmethod
    def draw(self) -> None:
        """Render the sprite."""


class Collider(ABC):
    """Something that can take part in a collision."""

    @abstractmethod
    def collide(self) -> None:
        """Resolve a collision."""


class BasicSprite(Sprite):
    def draw(self) -> None:
        print("Drawing a basic sprite...")


class BasicCollider(Collider):
    def collide(self) -> None:
        print("Colliding basic collider...")
