"""Command-line interface.

Provides commands for range checking, greeting rendering, and configuration
inspection.
"""

from __future__ import annotations

from bounded.cli.main import cli

__all__ = ["cli"]
