"""
Application services.

Services orchestrate repositories for the two demos and translate domain
failures into operation results and console report lines.
"""

from recordkeeping.application.services.health_system import HealthSystemApp
from recordkeeping.application.services.warehouse_manager import WarehouseManager

__all__ = ["HealthSystemApp", "WarehouseManager"]
