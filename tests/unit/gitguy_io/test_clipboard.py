# tests/unit/gitguy_io/test_clipboard.py
# Unit tests for clipboard copy via platform commands

import subprocess
import sys
from unittest.mock import patch

import pytest

from gitguy.core.exceptions import ClipboardError
from gitguy.gitguy_io import clipboard
from gitguy.gitguy_io.clipboard import copy_to_clipboard

LINUX_COMMANDS = [
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def _done(returncode):
    return subprocess.CompletedProcess(args=[], returncode=returncode)


@pytest.fixture
def linux_commands():
    with patch.object(clipboard, "_clipboard_commands", return_value=LINUX_COMMANDS):
        yield


class TestCommandSelection:

    # * Verify macOS uses pbcopy
    def test_darwin(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "darwin")
        assert clipboard._clipboard_commands() == [["pbcopy"]]

    # * Verify other platforms try wl-copy, xclip & xsel in order
    def test_linux(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(clipboard.os, "name", "posix")
        assert clipboard._clipboard_commands() == LINUX_COMMANDS


@pytest.mark.usefixtures("linux_commands")
class TestCopy:

    # * Verify the text is piped to the first installed command
    def test_copies_w_first_available(self):
        with patch.object(
            clipboard.shutil, "which", side_effect=lambda name: name if name == "xclip" else None
        ), patch.object(clipboard.subprocess, "run", return_value=_done(0)) as run:
            copy_to_clipboard("feat: add viewer")
        run.assert_called_once_with(
            ["xclip", "-selection", "clipboard"],
            input="feat: add viewer",
            text=True,
            check=False,
        )

    # * Verify a failing command falls through to the next one
    def test_falls_through(self):
        with patch.object(clipboard.shutil, "which", return_value="/usr/bin/x"), patch.object(
            clipboard.subprocess, "run", side_effect=[_done(1), OSError("boom"), _done(0)]
        ) as run:
            copy_to_clipboard("msg")
        assert run.call_count == 3

    # * Verify missing commands raise ClipboardError w/ an install hint
    def test_no_command(self):
        with patch.object(clipboard.shutil, "which", return_value=None):
            with pytest.raises(ClipboardError, match="no clipboard command found"):
                copy_to_clipboard("msg")

    # * Verify every command failing raises ClipboardError
    def test_all_fail(self):
        with patch.object(clipboard.shutil, "which", return_value="/usr/bin/x"), patch.object(
            clipboard.subprocess, "run", return_value=_done(1)
        ):
            with pytest.raises(ClipboardError, match="wl-copy / xclip / xsel failed"):
                copy_to_clipboard("msg")

    # * Verify empty text is rejected before any command runs
    def test_empty_text(self):
        with patch.object(clipboard.subprocess, "run") as run:
            with pytest.raises(ClipboardError, match="Nothing to copy"):
                copy_to_clipboard("")
        run.assert_not_called()
