# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Slashkit applications."""
from rich.console import Console
from rich.theme import Theme

SLASHKIT_THEME = Theme(
    {
        "command": "bold #88C0D0",
        "flag": "#A3BE8C",
        "placeholder": "italic #616E88",
        "error": "bold #BF616A",
    }
)

console = Console(color_system="truecolor", theme=SLASHKIT_THEME)
