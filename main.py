"""
Run the scene.

Keys:
    - W/S: forward / back
    - A/D: strafe
    - Q/E: down / up
    - LEFT/RIGHT: move the sun
    - Mouse drag: left rotates, right pans
    - ESC: quit
"""

import sys

from duskwater.cli import main

if __name__ == "__main__":
    sys.exit(main())
