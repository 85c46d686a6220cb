"""
Abstract Factory for cross-platform GUI widgets.

Each platform has its own factory producing a Button, a Menu and a Dialog.
Client code only talks to GUIFactory and the widget interfaces, so widgets
from different platforms are never mixed.
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..exceptions import ErrorContext, UnknownFamilyError
from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


class Platform(str, Enum):
    """GUI widget families."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"


class Widget(ABC):
    """A widget that belongs to exactly one platform family."""

    platform: Platform

    @abstractmethod
    def draw(self) -> None:
        """Render the widget."""


class Button(Widget, ABC):
    pass


class Menu(Widget, ABC):
    pass


class Dialog(Widget, ABC):
    pass


class _PrintsOwnName:  # pylint: disable=too-few-public-methods  # Reason: Mixin supplying the shared stub draw()
    def draw(self) -> None:
        print(type(self).__name__)


class WindowsButton(_PrintsOwnName, Button):
    platform = Platform.WINDOWS


class WindowsMenu(_PrintsOwnName, Menu):
    platform = Platform.WINDOWS


class WindowsDialog(_PrintsOwnName, Dialog):
    platform = Platform.WINDOWS


class LinuxButton(_PrintsOwnName, Button):
    platform = Platform.LINUX


class LinuxMenu(_PrintsOwnName, Menu):
    platform = Platform.LINUX


class LinuxDialog(_PrintsOwnName, Dialog):
    platform = Platform.LINUX


class MacOSButton(_PrintsOwnName, Button):
    platform = Platform.MACOS


class MacOSMenu(_PrintsOwnName, Menu):
    platform = Platform.MACOS


class MacOSDialog(_PrintsOwnName, Dialog):
    platform = Platform.MACOS


class GUIFactory(ABC):
    """Creates one compatible family of widgets."""

    platform: Platform

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_menu(self) -> Menu:
        pass

    @abstractmethod
    def create_dialog(self) -> Dialog:
        pass


class WindowsFactory(GUIFactory):
    platform = Platform.WINDOWS

    def create_button(self) -> Button:
        return WindowsButton()

    def create_menu(self) -> Menu:
        return WindowsMenu()

    def create_dialog(self) -> Dialog:
        return WindowsDialog()


class LinuxFactory(GUIFactory):
    platform = Platform.LINUX

    def create_button(self) -> Button:
        return LinuxButton()

    def create_menu(self) -> Menu:
        return LinuxMenu()

    def create_dialog(self) -> Dialog:
        return LinuxDialog()


class MacOSFactory(GUIFactory):
    platform = Platform.MACOS

    def create_button(self) -> Button:
        return MacOSButton()

    def create_menu(self) -> Menu:
        return MacOSMenu()

    def create_dialog(self) -> Dialog:
        return MacOSDialog()


_GUI_FACTORIES: dict[Platform, type[GUIFactory]] = {
    Platform.WINDOWS: WindowsFactory,
    Platform.LINUX: LinuxFactory,
    Platform.MACOS: MacOSFactory,
}


def get_gui_factory(platform: Platform | str = Platform.MACOS) -> GUIFactory:
    """
    Return the widget factory for a platform.

    Args:
        platform: Platform enum member or its value ("windows", "linux", "macos")

    Returns:
        GUIFactory: The concrete factory for that platform

    Raises:
        UnknownFamilyError: If no factory exists for the platform
    """
    try:
        selected = Platform(platform)
    except ValueError as exc:
        raise UnknownFamilyError(
            f"No GUI factory for platform '{platform}'",
            ErrorContext(example="gui", creator="get_gui_factory"),
            family=str(platform),
        ) from exc

    factory = _GUI_FACTORIES[selected]()
    logger.debug("GUI factory selected", platform=selected.value, factory=type(factory).__name__)
    return factory
