"""Shared Rich console instance for terminal output."""

from rich.console import Console

# Shared console used by the calendar renderer and commands
console = Console()
