"""Command implementations for migrant CLI."""

from .create import handle_create
from .migrate import handle_down, handle_redo, handle_up
from .status import handle_status, handle_version

__all__ = [
    "handle_up",
    "handle_down",
    "handle_redo",
    "handle_status",
    "handle_version",
    "handle_create",
]
