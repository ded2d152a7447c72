from recordkeeping.presentation.console.report import ConsoleReport

__all__ = ["ConsoleReport"]
