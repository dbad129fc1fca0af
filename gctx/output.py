from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

console = Console(highlight=False, soft_wrap=True)


def print_profiles(profiles: Iterable[str], active: Optional[str]):
    """Print one profile per line, the active one prefixed with '*' and highlighted"""
    for name in profiles:
        if name == active:
            console.print(Text(f"* {name}", style="bold green"))
        else:
            console.print(Text(f"  {name}"))


def print_current(name: str):
    console.print(Text(name))


def success(message: str):
    console.print(Text(message, style="green"))
