"""
Configuration Provider Main Entry Point

Read every typed setting from the configured store and print it.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from confprovider.cli import main


if __name__ == '__main__':
    sys.exit(main())
