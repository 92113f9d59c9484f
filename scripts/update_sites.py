#!/usr/bin/env python3
"""
Usage: python ./scripts/update_sites.py [--select 1,3] [--dry-run]
"""
import sys

# Add the scripts directory to path for the sitesync package
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent))

from sitesync.update import main

if __name__ == "__main__":
    sys.exit(main())
