# gitguy/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup
load_dotenv()

# patch Typer's Rich help styles before creating app
from ..ui.theming import typer_styles  # noqa: F401

from ..config.settings import settings_manager
from ..gitguy_io.console import console


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    help="Generate commit messages & PR descriptions from git diffs.",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings, theme & logging; show help when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug logging (implies --verbose)"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    from ..ui.theming.console_theme import initialize_theme

    initialize_theme()

    from ..core.verbose import init_verbose

    # log_file & debug imply verbose mode
    verbose_enabled = verbose or debug or log_file is not None
    init_verbose(enabled=verbose_enabled, log_file=log_file, debug=debug)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import diff as _diff  # noqa: F401, E402
from .commands import generate as _generate  # noqa: F401, E402
from .commands import review as _review  # noqa: F401, E402
from .commands import config as _config  # noqa: F401, E402
