"""CLI entry point for bounded package.

Allows running via: python -m bounded
"""

from __future__ import annotations

from bounded.cli.main import cli

if __name__ == "__main__":
    cli()
