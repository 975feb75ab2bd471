#!/usr/bin/env python3
"""
Human Play Mode - Play the Snake game yourself.

Controls:
    Space: Start a run
    Arrow Keys / WASD: Move
    ESC: Quit
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from snake_arcade.app import main


if __name__ == "__main__":
    sys.exit(main())
