# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance and styles for cmdtree output."""
from rich.console import Console


class Styles:
    USAGE = "bold"
    HEADING = "bold underline"
    TOKEN = "cyan"
    COMMAND = "bold magenta"
    ERROR = "bold red"


console = Console(stderr=True)
