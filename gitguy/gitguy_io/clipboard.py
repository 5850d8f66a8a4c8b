# gitguy/gitguy_io/clipboard.py
# Clipboard copy via the platform's clipboard command (pbcopy, clip, wl-copy, xclip, xsel)

from __future__ import annotations

import os
import shutil
import subprocess
import sys

from ..core.exceptions import ClipboardError


def _clipboard_commands() -> list[list[str]]:
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


# * Copy text to the system clipboard; first installed command that succeeds wins
def copy_to_clipboard(text: str) -> None:
    if not text:
        raise ClipboardError("Nothing to copy")

    available = [cmd for cmd in _clipboard_commands() if shutil.which(cmd[0])]
    if not available:
        raise ClipboardError(
            "failed to copy to clipboard: no clipboard command found "
            "(install wl-copy, xclip or xsel)"
        )

    for command in available:
        try:
            proc = subprocess.run(command, input=text, text=True, check=False)
        except OSError:
            continue
        if proc.returncode == 0:
            return
    raise ClipboardError(
        f"failed to copy to clipboard: {' / '.join(cmd[0] for cmd in available)} failed"
    )
