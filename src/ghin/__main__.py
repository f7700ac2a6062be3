"""
Main entry point for the GHIN client.
"""

import sys
from ghin.cli import main

if __name__ == "__main__":
    sys.exit(main())
