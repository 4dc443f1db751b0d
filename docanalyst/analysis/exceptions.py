class AnalysisError(Exception):
    """Raised when a document analysis cannot be produced."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
