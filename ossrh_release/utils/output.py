# ossrh_release/utils/output.py
"""Shared console"""

from rich.console import Console
from rich.rule import Rule

from ..constants import EMOJI_SUCCESS

console = Console()


def print_stage(title: str) -> None:
    """Print a stage header"""
    console.print()
    console.print(Rule(f"[bold]{title}[/bold]", style="cyan"))


def print_success(message: str) -> None:
    console.print(f"[green]{EMOJI_SUCCESS}[/green] {message}")
