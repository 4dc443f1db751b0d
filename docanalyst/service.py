"""Process-scoped wiring of the document analysis components.

One DocumentAnalystService is created at startup and handed to whatever
transport serves requests. Closing it clears the store and releases the
completion client.
"""

from collections.abc import Sequence
from datetime import datetime, timezone
from types import TracebackType

from docanalyst.analysis.client_base import BaseCompletionClient
from docanalyst.analysis.factory import AnalyzerFactory, CompletionClientFactory
from docanalyst.chat.chat_service import ChatService
from docanalyst.chat.context_builder import ChatContextBuilder
from docanalyst.chat.session import ChatSession
from docanalyst.config.settings import Settings
from docanalyst.documents.models import Document, StoreStats
from docanalyst.documents.store import DocumentStore
from docanalyst.extraction.factory import ExtractionDispatcherFactory
from docanalyst.logging.logger import Log
from docanalyst.processor.models import UploadedFile
from docanalyst.processor.processor import BatchIngestionProcessor, build_processor
from docanalyst.storage.local_storage import LocalArtifactStorage

SERVER_NAME = "Document Analysis API"


class DocumentAnalystService:
    """Facade over ingestion, the document store and chat."""

    def __init__(
        self,
        *,
        settings: Settings,
        store: DocumentStore,
        processor: BatchIngestionProcessor,
        chat_service: ChatService,
        client: BaseCompletionClient,
    ) -> None:
        self._settings = settings
        self._store = store
        self._processor = processor
        self._chat_service = chat_service
        self._client = client

    async def __aenter__(self) -> "DocumentAnalystService":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def store(self) -> DocumentStore:
        return self._store

    async def upload(self, batch: Sequence[UploadedFile]) -> list[dict[str, object]]:
        documents = await self._processor.ingest(batch)
        return [doc.to_listing() for doc in documents]

    def list_documents(self) -> list[dict[str, object]]:
        return self._store.list()

    def search_documents(self, term: str) -> list[dict[str, object]]:
        return self._store.search(term)

    def get_document(self, document_id: str) -> Document:
        return self._store.get(document_id)

    def delete_document(self, key: str) -> Document:
        return self._store.remove(key)

    def clear_documents(self) -> int:
        return self._store.clear()

    def stats(self) -> StoreStats:
        return self._store.stats()

    async def chat(self, message: str) -> str:
        return await self._chat_service.answer(message)

    def new_chat_session(self) -> ChatSession:
        return ChatSession(self._chat_service)

    def health(self) -> dict[str, object]:
        return {
            "status": "healthy",
            "server": SERVER_NAME,
            "aiAvailable": CompletionClientFactory.is_available(self._settings),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "documents": len(self._store),
        }

    async def close(self) -> None:
        removed = self._store.clear()
        await self._client.close()
        Log.info(f"Service closed, {removed} documents released")


def build_service(
    settings: Settings,
    client: BaseCompletionClient | None = None,
) -> DocumentAnalystService:
    """Build the service with all required adapters."""
    artifacts = LocalArtifactStorage(settings.uploads_dir)
    artifacts.ensure_root()
    store = DocumentStore(artifacts)
    if client is None:
        client = CompletionClientFactory.create(settings)
    processor = build_processor(
        settings,
        store=store,
        artifacts=artifacts,
        dispatcher=ExtractionDispatcherFactory.create(settings),
        analyzer=AnalyzerFactory.create(settings, client=client),
    )
    chat_service = ChatService(
        store=store,
        client=client,
        context_builder=ChatContextBuilder(settings.chat_excerpt_chars),
        model=settings.ai_model_name,
        temperature=settings.ai_temperature,
    )
    return DocumentAnalystService(
        settings=settings,
        store=store,
        processor=processor,
        chat_service=chat_service,
        client=client,
    )
