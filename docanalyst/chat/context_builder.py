from collections.abc import Sequence

from docanalyst.documents.models import Document

DEFAULT_EXCERPT_CHARS = 5_000


class ChatContextBuilder:
    """Concatenates a fixed-size excerpt of every document into one context.

    All documents are included, in store order, each cut to the same
    prefix length. There is no ranking or relevance filtering, so per
    document coverage shrinks as the prompt grows with more documents.
    """

    def __init__(self, excerpt_chars: int = DEFAULT_EXCERPT_CHARS) -> None:
        if excerpt_chars < 0:
            raise ValueError("excerpt_chars must be >= 0")
        self._excerpt_chars = excerpt_chars

    @property
    def excerpt_chars(self) -> int:
        return self._excerpt_chars

    def excerpt(self, document: Document) -> str:
        return document.content[: self._excerpt_chars]

    def build(self, documents: Sequence[Document]) -> str:
        return "\n\n".join(
            f"Document {index} ({document.filename}):\n{self.excerpt(document)}\n..."
            for index, document in enumerate(documents, start=1)
        )
