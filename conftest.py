"""Global pytest configuration.

This conftest runs before any test module is imported, which makes it the
place to pin the environment the settings object is built from.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# Make the repository root import-searchable so ``recordkeeping`` resolves
# from a plain source checkout.
_repo_root = Path(__file__).resolve().parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
