"""
Record Keeping Demos
====================
Entry point for running the warehouse inventory and healthcare prescription
demos from a source checkout.

The demos themselves are defined in recordkeeping/main.py and imported here.
"""

import sys

from recordkeeping.main import main

if __name__ == "__main__":
    sys.exit(main())
