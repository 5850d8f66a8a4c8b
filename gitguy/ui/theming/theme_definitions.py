# gitguy/ui/theming/theme_definitions.py
# Accent palettes for gitguy's chrome (titles, panels, selections)

from __future__ import annotations

DEFAULT_THEME = "deep_blue"

# five-stop palettes, primary to deep
THEMES = {
    "deep_blue": [
        "#4a90e2",  # sky blue
        "#357abd",  # medium blue
        "#2563eb",  # royal blue
        "#1d4ed8",  # deep blue
        "#1e40af",  # dark blue
    ],
    "terminal_green": [
        "#5fff87",  # bright mint
        "#3ddc84",  # android green
        "#22c55e",  # green
        "#16a34a",  # forest
        "#15803d",  # deep forest
    ],
    "amber": [
        "#ffd75f",  # pale gold
        "#ffb000",  # amber
        "#f59e0b",  # dark amber
        "#d97706",  # burnt orange
        "#b45309",  # brown orange
    ],
    "magenta": [
        "#ff87d7",  # pink
        "#ff5fd7",  # hot pink
        "#d946ef",  # fuchsia
        "#a855f7",  # purple
        "#7e22ce",  # deep purple
    ],
}
