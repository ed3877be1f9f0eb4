"""
System interaction utilities.

Process replacement, single-level directory creation, tolerant removal of
build artifacts, and tool availability checks.
"""

from .commands import (
    check_clean_tool_installed,
    exec_replace,
    make_directory,
    remove_directory,
    remove_path,
)

__all__ = [
    "check_clean_tool_installed",
    "exec_replace",
    "make_directory",
    "remove_directory",
    "remove_path",
]
