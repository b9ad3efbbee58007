"""CLI commands package."""

from cli.commands.color import color, palette
from cli.commands.day import mark, note, show_day, toggle, unmark
from cli.commands.delete import delete
from cli.commands.ls import ls
from cli.commands.new import new
from cli.commands.rename import rename
from cli.commands.show import show

__all__ = [
    "color",
    "delete",
    "ls",
    "mark",
    "new",
    "note",
    "palette",
    "rename",
    "show",
    "show_day",
    "toggle",
    "unmark",
]
