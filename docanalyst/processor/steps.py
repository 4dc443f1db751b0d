import asyncio

from docanalyst.analysis.base import BaseAnalyzer
from docanalyst.analysis.models import Analysis
from docanalyst.documents.models import Document, count_words, type_tag
from docanalyst.documents.store import DocumentStore
from docanalyst.extraction.dispatcher import ExtractionDispatcher
from docanalyst.logging.logger import Log
from docanalyst.processor.models import IngestionContext
from docanalyst.processor.pipeline import IngestionStep
from docanalyst.storage.base import BaseArtifactStorage
from docanalyst.storage.naming import generate_stored_name


class PersistArtifactStep(IngestionStep):
    def __init__(self, artifacts: BaseArtifactStorage) -> None:
        self._artifacts = artifacts

    async def run(self, context: IngestionContext) -> IngestionContext:
        context.stored_name = generate_stored_name(context.upload.filename)
        context.size_bytes = await asyncio.to_thread(
            self._artifacts.save, context.stored_name, context.upload.data
        )
        Log.info(f"Saved {context.size_bytes} bytes as {context.stored_name}")
        return context

    def degrade(self, context: IngestionContext, exc: Exception) -> IngestionContext:
        Log.error(f"Failed to persist {context.upload.filename}: {exc}")
        context.size_bytes = 0
        context.errors.append(f"persist: {exc}")
        return context


class ExtractTextStep(IngestionStep):
    def __init__(self, dispatcher: ExtractionDispatcher) -> None:
        self._dispatcher = dispatcher

    async def run(self, context: IngestionContext) -> IngestionContext:
        context.extracted_text = await self._dispatcher.extract(
            context.upload.data, context.upload.filename
        )
        return context

    def degrade(self, context: IngestionContext, exc: Exception) -> IngestionContext:
        Log.warning(f"Extraction failed for {context.upload.filename}: {exc}")
        context.extracted_text = ""
        context.errors.append(f"extract: {exc}")
        return context


class AnalyzeStep(IngestionStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    async def run(self, context: IngestionContext) -> IngestionContext:
        context.analysis = await self._analyzer.analyze(context.extracted_text)
        return context

    def degrade(self, context: IngestionContext, exc: Exception) -> IngestionContext:
        Log.error(f"Analysis failed for {context.upload.filename}: {exc}")
        context.analysis = Analysis.failed()
        context.errors.append(f"analyze: {exc}")
        return context


class BuildDocumentStep(IngestionStep):
    async def run(self, context: IngestionContext) -> IngestionContext:
        context.document = Document(
            id=context.document_id,
            stored_name=context.stored_name,
            filename=context.upload.filename,
            size_bytes=context.size_bytes,
            type_tag=type_tag(context.upload.filename),
            uploaded_at=context.uploaded_at,
            content=context.extracted_text,
            word_count=count_words(context.extracted_text),
            analysis=context.analysis,
        )
        return context


class CommitDocumentStep(IngestionStep):
    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def run(self, context: IngestionContext) -> IngestionContext:
        if context.document is None:
            raise ValueError("IngestionContext.document must be set before commit")
        self._store.insert(context.document)
        Log.info(
            f"Stored document {context.document.id} ({context.document.filename}, "
            f"{context.document.word_count} words)"
        )
        return context
