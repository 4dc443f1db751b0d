from abc import ABC, abstractmethod

from docanalyst.processor.models import IngestionContext


class IngestionStep(ABC):
    @abstractmethod
    async def run(self, context: IngestionContext) -> IngestionContext:
        raise NotImplementedError

    def degrade(self, context: IngestionContext, exc: Exception) -> IngestionContext:
        """Recover from a failure of this step, or re-raise it.

        Steps whose failure must not abort the batch override this to fill
        the context with best-effort defaults.
        """
        raise exc
