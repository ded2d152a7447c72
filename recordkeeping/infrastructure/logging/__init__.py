"""
Logging infrastructure for the record-keeping demos.

Callers obtain module loggers with:
    from recordkeeping.infrastructure.logging import get_logger
"""

from .logger import StructuredFormatter, build_formatter, get_logger  # noqa: F401  (re-export)
