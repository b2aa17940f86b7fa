"""
Entry point for `python -m standfinder_qt`.

Logging is configured at the top of app_qt.py, before any Qt import.
This module simply delegates to app_qt.main().
"""

import sys

from standfinder_qt.app_qt import main

if __name__ == "__main__":
    sys.exit(main())
