"""
Full clean orchestration.

Runs the external clean tool as a child process, waits for it, and only then
removes the build folder and the build description file. The sequence never
fails: a tool that cannot be started, exits non-zero or is missing from PATH
only skips the external step, and the filesystem cleanup always runs.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import psutil

from ..config import get_config
from ..models import CleanSpec
from ..system import check_clean_tool_installed, remove_directory, remove_path
from ..validation import ErrorSeverity, handle_subprocess_error

logger = logging.getLogger(__name__)


class CleanPhase(Enum):
    """Lifecycle of a full clean."""
    PENDING = "pending"
    RUNNING = "running"
    DONE = "done"


@dataclass
class CleanState:
    """Observable state of one full clean run."""
    phase: CleanPhase = CleanPhase.PENDING
    tool_started: bool = False
    tool_exit_code: Optional[int] = None
    build_folder_removed: bool = False
    output_removed: bool = False


class CleanOrchestrator:
    """
    Sequences the external clean tool and the artifact removal that follows it.

    The parent blocks on the child with no timeout. The child's exit status
    is recorded and logged but never changes what happens next.
    """

    def __init__(self, spec: CleanSpec, tool: Optional[str] = None):
        self.spec = spec
        self.tool = tool or get_config().clean_tool
        self.state = CleanState()

    def build_command(self) -> List[str]:
        """Return the clean tool's argument vector."""
        return [self.tool, "-f", self.spec.output, "-t", "clean"]

    def run(self) -> CleanState:
        """
        Run the clean tool, wait for it, then remove the build artifacts.

        Returns:
            The final CleanState
        """
        self.state.phase = CleanPhase.RUNNING

        process = self._start_clean_tool()
        if process is not None:
            self._wait_for_clean_tool(process)

        self._remove_build_artifacts()

        self.state.phase = CleanPhase.DONE
        logger.info(f"Full clean of {self.spec.output} finished")
        return self.state

    def _start_clean_tool(self) -> Optional[psutil.Popen]:
        """Start the clean tool with inherited standard streams, or return None."""
        command = self.build_command()

        if not check_clean_tool_installed(self.tool):
            logger.warning(f"Clean tool '{self.tool}' not found in PATH")

        try:
            process = psutil.Popen(command)
        except (OSError, ValueError, psutil.Error) as e:
            handle_subprocess_error(e, " ".join(command), severity=ErrorSeverity.ERROR,
                                    reraise=False, logger=logger)
            return None

        self.state.tool_started = True
        logger.info(f"Clean tool started with PID: {process.pid}: {' '.join(command)}")
        return process

    def _wait_for_clean_tool(self, process: psutil.Popen) -> None:
        exit_code = process.wait()
        self.state.tool_exit_code = exit_code
        if exit_code != 0:
            logger.info(f"Clean tool exited with code {exit_code}, continuing cleanup")
        else:
            logger.debug("Clean tool finished successfully")

    def _remove_build_artifacts(self) -> None:
        """Remove the build folder (only if empty), then the output file."""
        if self.spec.build_folder:
            self.state.build_folder_removed = remove_directory(self.spec.build_folder)
        self.state.output_removed = remove_path(self.spec.output)


def full_clean(spec: CleanSpec, tool: Optional[str] = None) -> None:
    """
    Clean a build: run ``<tool> -f <output> -t clean``, then remove artifacts.

    After the tool exits, whatever its status, ``spec.build_folder`` is
    removed if given and empty, and ``spec.output`` is removed. Every failure
    along the way is logged and ignored.

    Args:
        spec: Build description file and optional build folder
        tool: Clean tool executable; ``clean.tool`` from the configuration
            (``ninja`` by default) when omitted
    """
    CleanOrchestrator(spec, tool=tool).run()
