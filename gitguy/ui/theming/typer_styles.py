# gitguy/ui/theming/typer_styles.py
# Patch Typer's Rich help styles globally (imported for side effects by cli/app.py)
from __future__ import annotations

import typer.rich_utils as ru

ru.MAX_WIDTH = 100  # type: ignore
ru.COLOR_SYSTEM = "auto"  # type: ignore

ru.STYLE_HEADING = "bold bright_white"  # type: ignore
ru.STYLE_USAGE = "bold yellow"  # type: ignore

ru.OPTIONS_PANEL_TITLE = "Options"  # type: ignore
ru.COMMANDS_PANEL_TITLE = "Commands"  # type: ignore
ru.STYLE_OPTIONS_PANEL_BORDER = "dim"  # type: ignore
ru.STYLE_COMMANDS_PANEL_BORDER = "dim"  # type: ignore

ru.STYLE_OPTION = "bold bright_cyan"  # type: ignore
ru.STYLE_SWITCH = "bright_cyan"  # type: ignore
ru.STYLE_NEGATIVE_OPTION = "bold magenta"  # type: ignore
ru.STYLE_METAVAR = "bold white"  # type: ignore

# command name styling varies by Typer version
if hasattr(ru, "STYLE_COMMANDS_TABLE_FIRST_COLUMN"):
    ru.STYLE_COMMANDS_TABLE_FIRST_COLUMN = "bold bright_yellow"  # type: ignore
