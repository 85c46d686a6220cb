"""Tests for the entry point that runs every example."""

from unittest.mock import patch

import pytest

from creational.builder.dice import reset_dice_roller
from creational.exceptions import BuilderStateError, handle_exception
from creational.main import main


@pytest.mark.usefixtures("restore_logging")
def test_main_runs_all_examples(capsys, monkeypatch):
    monkeypatch.setenv("FAMILY_GUI_PLATFORM", "linux")
    monkeypatch.setenv("FAMILY_DATABASE_VENDOR", "oracle")
    monkeypatch.setenv("DICE_SEED", "8")

    assert main() == 0

    out = capsys.readouterr().out
    assert "== Factory Method: game objects ==" in out
    assert out.count("Drawing a basic sprite...") == 5
    assert "LinuxButton\nLinuxMenu\nLinuxDialog\n" in out
    assert "Oracle executing: SELECT * FROM some_table" in out
    assert "NPC Link:" in out
    assert "Character Ganon:" in out
    assert "Character Villager:" in out


@pytest.mark.usefixtures("restore_logging")
def test_main_output_is_reproducible_with_seed(capsys, monkeypatch):
    monkeypatch.setenv("DICE_SEED", "8")
    main()
    first = capsys.readouterr().out

    reset_dice_roller()
    main()

    assert capsys.readouterr().out == first


@pytest.mark.usefixtures("restore_logging")
def test_main_reports_unexpected_failure(capsys, monkeypatch):
    def explode():
        raise RuntimeError("sprite sheet missing")

    monkeypatch.setattr("creational.main.run_factory_method_example", explode)

    with patch("creational.main.handle_exception", wraps=handle_exception) as mock_handle:
        assert main() == 1

    exc, context = mock_handle.call_args.args
    assert isinstance(exc, RuntimeError)
    assert context.example == "main"
    assert "Builder: NPC" not in capsys.readouterr().out


@pytest.mark.usefixtures("restore_logging")
def test_main_reports_creational_error(monkeypatch):
    def refuse(_roller):
        raise BuilderStateError("no name", builder="HeroBuilder")

    monkeypatch.setattr("creational.main.run_npc_builder_example", refuse)

    assert main() == 1
