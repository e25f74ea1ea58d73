"""Utility modules for activity-line."""

from .console import (
    console,
    err_console,
    print_error,
    print_info,
    print_panel,
    print_success,
)
from .log_config import configure_logging
from .stdin import read_statusline_input

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_panel",
    "print_success",
    "configure_logging",
    "read_statusline_input",
]
