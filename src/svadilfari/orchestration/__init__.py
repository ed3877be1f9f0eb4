"""
Build teardown orchestration.

Runs the external clean tool and removes build artifacts once it has
finished.
"""

from .clean import CleanOrchestrator, CleanPhase, CleanState, full_clean

__all__ = [
    "CleanOrchestrator",
    "CleanPhase",
    "CleanState",
    "full_clean",
]
