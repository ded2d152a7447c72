from recordkeeping.application.dtos.operation_result import OperationResult

__all__ = ["OperationResult"]
