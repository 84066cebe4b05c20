"""Tests for the theme commands."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from todolite.commands.theme_command import app
from todolite.services.config_service import get_storage
from todolite.services.theme_service import THEME_KEY

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("cli_storage")


def test_show_without_saved_theme():
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert "No theme saved" in result.output


def test_set_then_show():
    result = runner.invoke(app, ["set", "nord"])
    assert result.exit_code == 0
    assert get_storage().get_item(THEME_KEY) == "nord"

    result = runner.invoke(app, ["show"])
    assert "nord" in result.output


def test_set_unknown_theme_warns_but_saves():
    result = runner.invoke(app, ["set", "no-such-theme"])
    assert result.exit_code == 0
    assert "Warning" in result.output
    assert get_storage().get_item(THEME_KEY) == "no-such-theme"


def test_list_includes_builtin_themes():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "textual-dark" in result.output
