"""
sitesync - rebuild sibling front-end repos and import their build output.

Usage:
    python -m sitesync [options]
    python scripts/update_sites.py [options]

Run without options to pick the repos from an interactive menu.
"""

from .update.orchestrator import main

__version__ = "0.1.0"

__all__ = ["__version__", "main"]
