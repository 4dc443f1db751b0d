from abc import ABC, abstractmethod

from docanalyst.analysis.models import Analysis


class BaseAnalyzer(ABC):
    """Contract for all document analyzers."""

    @abstractmethod
    async def analyze(self, text: str) -> Analysis:
        """Turn extracted document text into a structured analysis.

        Args:
            text: Plain text produced by the extraction step.

        Returns:
            Analysis. Implementations never raise; when no real analysis can
            be produced they return a placeholder Analysis instead.
        """
