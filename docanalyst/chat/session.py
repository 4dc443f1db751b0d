"""Client-side chat conversation with history and export."""

import random
from datetime import datetime, timezone

from docanalyst.chat.chat_service import ChatService
from docanalyst.chat.exceptions import ChatError
from docanalyst.chat.models import ChatTurn
from docanalyst.documents.store import DocumentStore

SUGGESTED_QUESTIONS = (
    "Summarize all uploaded documents",
    "Find financial information in the documents",
    "What are the key findings across all documents?",
    "Compare the different documents",
    "Extract important dates and deadlines",
    "Find statistics and data points",
    "What recommendations are mentioned?",
    "Show me budget allocations",
    "Find information about marketing strategies",
    "What are the growth projections?",
)


def suggest_questions(count: int = 5, rng: random.Random | None = None) -> list[str]:
    rng = rng or random.Random()
    return rng.sample(SUGGESTED_QUESTIONS, min(count, len(SUGGESTED_QUESTIONS)))


class ChatSession:
    """Keeps the turns of one conversation. Nothing here is shared server-side."""

    def __init__(self, service: ChatService) -> None:
        self._service = service
        self._turns: list[ChatTurn] = []

    @property
    def turns(self) -> list[ChatTurn]:
        return list(self._turns)

    async def ask(self, message: str) -> ChatTurn:
        """Send *message* and record both turns. A failed request records neither."""
        reply = await self._service.answer(message)
        self._turns.append(ChatTurn(role="user", content=message.strip()))
        answer = ChatTurn(role="assistant", content=reply)
        self._turns.append(answer)
        return answer

    def clear(self) -> None:
        self._turns.clear()

    def export(self, store: DocumentStore) -> dict[str, object]:
        if not self._turns:
            raise ChatError("No chat history to export")
        documents = store.all()
        return {
            "exportDate": datetime.now(timezone.utc).isoformat(),
            "documents": [
                {
                    "filename": doc.filename,
                    "uploaded": doc.uploaded_at.isoformat(),
                    "summary": doc.analysis.summary,
                }
                for doc in documents
            ],
            "chatHistory": [turn.to_dict() for turn in self._turns],
            "stats": {
                "totalDocuments": len(documents),
                "totalChatMessages": len(self._turns),
            },
        }
