import uuid
from collections.abc import Callable, Sequence

from docanalyst.analysis.base import BaseAnalyzer
from docanalyst.config.settings import Settings
from docanalyst.documents.models import Document, utc_now
from docanalyst.documents.store import DocumentStore
from docanalyst.extraction.dispatcher import ExtractionDispatcher
from docanalyst.logging.logger import Log
from docanalyst.processor.models import IngestionContext, UploadedFile
from docanalyst.processor.pipeline import IngestionStep
from docanalyst.processor.steps import (
    AnalyzeStep,
    BuildDocumentStep,
    CommitDocumentStep,
    ExtractTextStep,
    PersistArtifactStep,
)
from docanalyst.processor.upload_policy import UploadPolicy
from docanalyst.storage.base import BaseArtifactStorage


def new_document_id() -> str:
    return uuid.uuid4().hex


class BatchIngestionProcessor:
    """Runs every file of an upload batch through the ingestion steps.

    Pipeline per file: persist -> extract -> analyze -> build -> commit.

    Files are processed one at a time, in upload order, and each one is
    committed to the store before the next starts. This keeps at most one
    AI request in flight per batch. A failing step degrades its own file
    to defaults; only policy violations reject the whole batch.
    """

    def __init__(
        self,
        *,
        policy: UploadPolicy,
        steps: Sequence[IngestionStep],
        id_factory: Callable[[], str] = new_document_id,
    ) -> None:
        self._policy = policy
        self._steps = list(steps)
        self._id_factory = id_factory

    async def ingest(self, batch: Sequence[UploadedFile]) -> list[Document]:
        """Ingest *batch* and return one Document per file, in upload order.

        Raises:
            BatchValidationError: if the batch violates the upload policy.
            DocumentStoreError: if a document cannot be committed.
        """
        self._policy.validate(batch)
        Log.info(f"Files received: {[upload.filename for upload in batch]}")

        documents: list[Document] = []
        for position, upload in enumerate(batch, start=1):
            context = IngestionContext(
                upload=upload,
                position=position,
                document_id=self._id_factory(),
                uploaded_at=utc_now(),
            )
            context = await self._run_steps(context)
            if context.document is None:
                raise ValueError(f"No document built for {upload.filename}")
            documents.append(context.document)

        Log.info(f"Successfully uploaded and analyzed {len(documents)} document(s)")
        return documents

    async def _run_steps(self, context: IngestionContext) -> IngestionContext:
        for step in self._steps:
            try:
                context = await step.run(context)
            except Exception as exc:
                context = step.degrade(context, exc)
        if context.errors:
            Log.warning(
                f"File {context.position} ({context.upload.filename}) ingested "
                f"with degraded results: {context.errors}"
            )
        return context


def build_processor(
    settings: Settings,
    *,
    store: DocumentStore,
    artifacts: BaseArtifactStorage,
    dispatcher: ExtractionDispatcher,
    analyzer: BaseAnalyzer,
) -> BatchIngestionProcessor:
    """Build a BatchIngestionProcessor with the standard ingestion steps."""
    steps: list[IngestionStep] = [
        PersistArtifactStep(artifacts),
        ExtractTextStep(dispatcher),
        AnalyzeStep(analyzer),
        BuildDocumentStep(),
        CommitDocumentStep(store),
    ]
    return BatchIngestionProcessor(
        policy=UploadPolicy.from_settings(settings),
        steps=steps,
    )
