"""Exceptions raised by the analysis engine."""


class AnalysisError(Exception):
    """Base exception for analysis failures."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"[{operation}] {message}")


class DegenerateTestError(AnalysisError):
    """Raised when a test statistic has zero variance and cannot be scaled."""

    pass
