"""Tests for command_wrapper and AppError."""

from __future__ import annotations

import pytest
import typer

from todolite.commands.decorators import AppError, command_wrapper
from todolite.utils.exit_codes import ERROR_GENERAL, ERROR_NOT_FOUND


def test_returns_result():
    @command_wrapper
    def ok():
        return 42

    assert ok() == 42


def test_app_error_becomes_exit_code(capsys):
    @command_wrapper
    def missing():
        raise AppError("Todo 'x' not found", ERROR_NOT_FOUND)

    with pytest.raises(typer.Exit) as exc_info:
        missing()
    assert exc_info.value.exit_code == ERROR_NOT_FOUND
    assert "Todo 'x' not found" in capsys.readouterr().out


def test_unexpected_error_becomes_general_exit():
    @command_wrapper
    def boom():
        raise RuntimeError("disk on fire")

    with pytest.raises(typer.Exit) as exc_info:
        boom()
    assert exc_info.value.exit_code == ERROR_GENERAL


def test_typer_exit_passes_through():
    @command_wrapper
    def cancelled():
        raise typer.Exit(0)

    with pytest.raises(typer.Exit) as exc_info:
        cancelled()
    assert exc_info.value.exit_code == 0


def test_outcome_is_logged(isolated_logger):
    @command_wrapper
    def missing():
        raise AppError("nope")

    with pytest.raises(typer.Exit):
        missing()

    content = (isolated_logger / "todolite.log").read_text(encoding="utf-8")
    assert "command started: missing" in content
    assert "command failed: missing" in content
    assert "ERROR_GENERAL - nope" in content


def test_wraps_preserves_name():
    @command_wrapper
    def named():
        pass

    assert named.__name__ == "named"


def test_not_found_code_name_is_logged(isolated_logger):
    @command_wrapper
    def missing():
        raise AppError("Todo 'x' not found", ERROR_NOT_FOUND)

    with pytest.raises(typer.Exit):
        missing()

    content = (isolated_logger / "todolite.log").read_text(encoding="utf-8")
    assert "ERROR_NOT_FOUND" in content


def test_error_text_that_looks_like_markup_is_printed_verbatim(capsys):
    @command_wrapper
    def broken():
        raise RuntimeError("closing tag [/b] here")

    with pytest.raises(typer.Exit) as exc_info:
        broken()
    assert exc_info.value.exit_code == ERROR_GENERAL
    assert "closing tag [/b] here" in capsys.readouterr().out
