"""Entry point for the GUI application.

Usage:
    python -m pfq.gui
"""

import sys

if __name__ == "__main__":
    from pfq.gui.app import main

    sys.exit(main())
