"""
Process replacement and filesystem primitives.

None of these raise on expected OS failures, and a path the OS cannot
represent (an empty executable name, an embedded NUL byte) counts as one. A
failed exec is reported and returns to the caller; directory creation and
removal failures are logged at debug level and otherwise ignored.
"""

import logging
import os
import shutil
import sys
from typing import Optional

from ..config import get_config
from ..validation import ErrorSeverity, handle_file_error, handle_subprocess_error, validate_host_argument

logger = logging.getLogger(__name__)


def _flush_output() -> None:
    """Flush stdio and log handlers; exec discards unflushed buffers."""
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()
    for handler in logging.getLogger().handlers:
        handler.flush()


def exec_replace(*argv: str) -> None:
    """Replace the current process image with ``argv[0]``.

    The executable is looked up on PATH and receives the whole ``argv``,
    argument zero included. With no arguments this is a no-op.

    On success this never returns: nothing the caller planned to run
    afterwards (``finally`` blocks, ``atexit`` handlers, context manager
    exits) will run. On failure the reason is logged and the call returns
    normally; callers should treat that as fatal for the current operation.

    Args:
        *argv: Executable name followed by its arguments. Numbers are
            accepted and passed in their string form.

    Raises:
        ValidationError: If an argument has no string form.

    Examples:
        >>> exec_replace("definitely-not-a-real-binary")  # logs and returns
    """
    if not argv:
        return

    arguments = [validate_host_argument(value, position, field_name="execvp")
                 for position, value in enumerate(argv, start=1)]
    executable = arguments[0]

    logger.debug(f"Replacing process {os.getpid()} with: {' '.join(arguments)}")
    _flush_output()
    try:
        os.execvp(executable, arguments)
    except (OSError, ValueError) as e:
        handle_subprocess_error(e, executable, severity=ErrorSeverity.ERROR,
                                reraise=False, logger=logger)


def make_directory(path: str, mode: Optional[int] = None) -> None:
    """
    Create a single directory level.

    Parents are not created. An existing directory, a missing parent or a
    permission problem leaves the filesystem unchanged without an error.

    Args:
        path: Directory to create
        mode: Permission bits; ``directories.mode`` from the configuration
            (0o755 by default) when omitted. The umask applies.
    """
    if mode is None:
        mode = get_config().directory_mode
    try:
        os.mkdir(path, mode)
        logger.debug(f"Created directory {path} with mode {oct(mode)}")
    except (OSError, ValueError) as e:
        handle_file_error(e, f"creating directory '{path}'",
                          severity=ErrorSeverity.DEBUG, reraise=False, logger=logger)


def remove_directory(path: str) -> bool:
    """Remove an empty directory. Returns whether it was removed."""
    try:
        os.rmdir(path)
        logger.debug(f"Removed directory {path}")
        return True
    except (OSError, ValueError) as e:
        handle_file_error(e, f"removing directory '{path}'",
                          severity=ErrorSeverity.DEBUG, reraise=False, logger=logger)
        return False


def remove_path(path: str) -> bool:
    """
    Remove a file, or an empty directory, like C's remove().

    Returns:
        Whether the path was removed
    """
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)
        logger.debug(f"Removed {path}")
        return True
    except (OSError, ValueError) as e:
        handle_file_error(e, f"removing '{path}'",
                          severity=ErrorSeverity.DEBUG, reraise=False, logger=logger)
        return False


def check_clean_tool_installed(tool: Optional[str] = None) -> bool:
    """Check if the clean tool is available on the system PATH.

    Args:
        tool: Executable name; ``clean.tool`` from the configuration when omitted.

    Returns:
        True if the tool is found in PATH, False otherwise.
    """
    if tool is None:
        tool = get_config().clean_tool
    return shutil.which(tool) is not None
