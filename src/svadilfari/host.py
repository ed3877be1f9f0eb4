"""
Call surface exposed to the build script host.

The host passes tables (any ``Mapping``) and positional values, and expects
sequences back as tables keyed from 1. Field access follows the host's
rules: string fields accept numbers, boolean fields are true only for a real
``True``, and a call whose parameter is not a table returns nothing.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

from .finder import walker
from .models import CleanSpec, SearchSpec
from .orchestration import full_clean
from .system import exec_replace, make_directory
from .validation import coerce_host_string, validate_host_argument

logger = logging.getLogger(__name__)

MODULE_NAME = "svadilfari.utils"


def _get_string_field(table: Mapping, key: str) -> Optional[str]:
    return coerce_host_string(table.get(key))


def _get_bool_field(table: Mapping, key: str) -> bool:
    return table.get(key) is True


def find(table: Any) -> Optional[Dict[int, str]]:
    """
    ``find{path=..., extension=..., recursive=...}``

    Returns:
        Matching paths keyed from 1, or None when ``table`` is not a table
    """
    if not isinstance(table, Mapping):
        return None

    recursive = _get_bool_field(table, "recursive")
    path = _get_string_field(table, "path")
    extension = _get_string_field(table, "extension")

    if path is None:
        return {}

    return walker.find(SearchSpec(path=path, extension=extension, recursive=recursive)).to_table()


def execvp(*args: Any) -> None:
    """``execvp(executable, args...)``; returns only if the exec failed."""
    exec_replace(*args)


def mkdir(path: Any) -> None:
    """``mkdir(path)``"""
    make_directory(validate_host_argument(path, 1, field_name="mkdir"))


def fullclean(table: Any) -> None:
    """``fullclean{output=..., buildFolder=...}``"""
    if not isinstance(table, Mapping):
        return None

    output = _get_string_field(table, "output")
    build_folder = _get_string_field(table, "buildFolder")

    if output is None:
        logger.warning("fullclean called without an output file, nothing to clean")
        return None

    full_clean(CleanSpec(output=output, build_folder=build_folder))
    return None


MODULE_FUNCTIONS: Dict[str, Callable[..., Any]] = {
    "find": find,
    "execvp": execvp,
    "mkdir": mkdir,
    "fullclean": fullclean,
}


def open_module() -> Dict[str, Callable[..., Any]]:
    """Return a fresh table of the module's functions for the host to bind."""
    return dict(MODULE_FUNCTIONS)
