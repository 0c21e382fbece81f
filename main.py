#!/usr/bin/env python3
"""Go version updater entry point"""

import sys

from goautomate.cli import run

if __name__ == "__main__":
    sys.exit(run())
