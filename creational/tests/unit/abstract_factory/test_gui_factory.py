"""
Tests for the GUI widget abstract factory.

Every factory must produce a complete, single-platform family of widgets.
"""

import pytest

from creational.abstract_factory.gui import (
    Button,
    Dialog,
    GUIFactory,
    LinuxFactory,
    MacOSFactory,
    Menu,
    Platform,
    WindowsFactory,
    get_gui_factory,
)
from creational.exceptions import UnknownFamilyError

ALL_FACTORIES = [WindowsFactory, LinuxFactory, MacOSFactory]


class TestFamilies:
    """Products of one factory always belong to that factory's platform."""

    @pytest.mark.parametrize("factory_cls", ALL_FACTORIES)
    def test_products_share_factory_platform(self, factory_cls):
        factory = factory_cls()

        widgets = [factory.create_button(), factory.create_menu(), factory.create_dialog()]

        assert {widget.platform for widget in widgets} == {factory.platform}

    @pytest.mark.parametrize("factory_cls", ALL_FACTORIES)
    def test_products_implement_widget_interfaces(self, factory_cls):
        factory = factory_cls()

        assert isinstance(factory.create_button(), Button)
        assert isinstance(factory.create_menu(), Menu)
        assert isinstance(factory.create_dialog(), Dialog)

    @pytest.mark.parametrize(
        ("factory_cls", "prefix"),
        [(WindowsFactory, "Windows"), (LinuxFactory, "Linux"), (MacOSFactory, "MacOS")],
    )
    def test_widgets_draw_their_class_name(self, factory_cls, prefix, capsys):
        factory = factory_cls()

        factory.create_button().draw()
        factory.create_menu().draw()
        factory.create_dialog().draw()

        assert capsys.readouterr().out == f"{prefix}Button\n{prefix}Menu\n{prefix}Dialog\n"

    def test_each_call_returns_a_new_widget(self):
        factory = LinuxFactory()

        assert factory.create_button() is not factory.create_button()

    def test_abstract_factory_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            GUIFactory()  # pylint: disable=abstract-class-instantiated


class TestGetGuiFactory:
    """Selecting a family by platform."""

    @pytest.mark.parametrize(
        ("platform", "expected_cls"),
        [
            (Platform.WINDOWS, WindowsFactory),
            (Platform.LINUX, LinuxFactory),
            (Platform.MACOS, MacOSFactory),
            ("windows", WindowsFactory),
            ("linux", LinuxFactory),
        ],
    )
    def test_selects_factory(self, platform, expected_cls):
        assert isinstance(get_gui_factory(platform), expected_cls)

    def test_defaults_to_macos(self):
        assert isinstance(get_gui_factory(), MacOSFactory)

    def test_unknown_platform_raises(self):
        with pytest.raises(UnknownFamilyError) as exc_info:
            get_gui_factory("templeos")

        assert exc_info.value.family == "templeos"
        assert isinstance(exc_info.value, ValueError)
