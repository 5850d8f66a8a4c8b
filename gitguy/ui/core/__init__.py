# gitguy/ui/core/__init__.py
# Core UI building blocks

from .rich_components import *  # noqa: F401,F403
