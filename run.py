#!/usr/bin/env python3
"""
Guarded Account Entry Point

Runs one interactive console session against a withdrawal-limited account.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from guarded_account.cli import main


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nSession cancelled.")
        sys.exit(1)
