"""
Command-line interface for the svadilfari package.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
