"""In-memory registry of ingested documents.

The store owns the full text of every document. Listings never include
``content``; only ``get`` and ``all`` hand out full records.

Documents are kept in insertion order, which defines "last uploaded".
Lookups by the stored artifact name go through an explicit secondary
index. That key only exists for clients that still reference documents
by stored name, and could be dropped once they all send ids.
"""

from __future__ import annotations

import threading

from docanalyst.documents.exceptions import DocumentNotFoundError, DuplicateDocumentError
from docanalyst.documents.models import Document, StoreStats
from docanalyst.logging.logger import Log
from docanalyst.storage.base import BaseArtifactStorage


class DocumentStore:
    """Append-and-remove collection of documents keyed by id."""

    def __init__(self, artifacts: BaseArtifactStorage) -> None:
        self._artifacts = artifacts
        self._documents: dict[str, Document] = {}
        self._id_by_stored_name: dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._documents)

    def insert(self, document: Document) -> None:
        """Append *document*.

        Raises:
            DuplicateDocumentError: if its id or stored name is already present.
        """
        with self._lock:
            if document.id in self._documents:
                raise DuplicateDocumentError(f"Document id {document.id} already exists")
            if document.stored_name in self._id_by_stored_name:
                raise DuplicateDocumentError(
                    f"Stored name {document.stored_name} already exists"
                )
            self._documents[document.id] = document
            self._id_by_stored_name[document.stored_name] = document.id

    def all(self) -> list[Document]:
        """Snapshot of all full records, in insertion order."""
        with self._lock:
            return list(self._documents.values())

    def get(self, document_id: str) -> Document:
        """Return the full record including content.

        Raises:
            DocumentNotFoundError: if no document has this id.
        """
        with self._lock:
            document = self._documents.get(document_id)
        if document is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return document

    def search(self, term: str) -> list[dict[str, object]]:
        """Listings whose filename contains *term*, case-insensitively."""
        needle = term.strip().lower()
        with self._lock:
            return [
                doc.to_listing()
                for doc in self._documents.values()
                if needle in doc.filename.lower()
            ]

    def remove(self, key: str) -> Document:
        """Remove a document by id, or by stored name as a fallback.

        The backing artifact is deleted too; an artifact that is already
        gone is tolerated.

        Raises:
            DocumentNotFoundError: if neither key matches.
        """
        with self._lock:
            document_id = key if key in self._documents else self._id_by_stored_name.get(key)
            if document_id is None:
                raise DocumentNotFoundError(f"Document {key} not found")
            document = self._documents.pop(document_id)
            del self._id_by_stored_name[document.stored_name]

        self._delete_artifact(document)
        Log.info(f"Document \"{document.filename}\" deleted ({document.id})")
        return document

    def clear(self) -> int:
        """Remove every document. Returns how many were removed.

        Failures deleting individual artifacts are logged; the records are
        dropped regardless.
        """
        with self._lock:
            removed = list(self._documents.values())
            self._documents.clear()
            self._id_by_stored_name.clear()

        for document in removed:
            self._delete_artifact(document)
        Log.info(f"Cleared {len(removed)} documents")
        return len(removed)

    def _delete_artifact(self, document: Document) -> None:
        try:
            self._artifacts.delete(document.stored_name)
        except Exception as exc:
            Log.warning(f"Failed to delete artifact {document.stored_name}: {exc}")

    def stats(self) -> StoreStats:
        with self._lock:
            documents = list(self._documents.values())
        if not documents:
            return StoreStats()
        return StoreStats(
            total_documents=len(documents),
            total_size_bytes=sum(doc.size_bytes for doc in documents),
            total_words=sum(doc.word_count for doc in documents),
            last_uploaded_at=documents[-1].uploaded_at,
        )

    def list(self) -> list[dict[str, object]]:
        """All documents without their content, in insertion order."""
        with self._lock:
            return [doc.to_listing() for doc in self._documents.values()]
