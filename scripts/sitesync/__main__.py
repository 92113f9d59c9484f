"""
Entry point for running sitesync as a module: python -m sitesync
"""

import sys
from .update.orchestrator import main

if __name__ == "__main__":
    sys.exit(main())
