from pathlib import Path

from docanalyst.analysis.client_base import BaseCompletionClient
from docanalyst.analysis.prompt_loader import load_chat_prompt
from docanalyst.chat.context_builder import ChatContextBuilder
from docanalyst.chat.exceptions import ChatError
from docanalyst.documents.store import DocumentStore
from docanalyst.logging.logger import Log

NO_DOCUMENTS_REPLY = (
    "I don't have any documents to read yet. Please upload some files first."
)


class ChatService:
    """Answers questions from the documents currently in the store."""

    def __init__(
        self,
        *,
        store: DocumentStore,
        client: BaseCompletionClient,
        context_builder: ChatContextBuilder,
        model: str,
        temperature: float = 0.2,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._store = store
        self._client = client
        self._context_builder = context_builder
        self._model = model
        self._temperature = temperature
        self._prompt_template = load_chat_prompt(prompt_template_path)

    async def answer(self, message: str) -> str:
        """Answer *message* using every stored document as context.

        Raises:
            ChatError: if the message is blank or the AI call fails.
        """
        if not message or not message.strip():
            raise ChatError("Message is required")

        documents = self._store.all()
        if not documents:
            return NO_DOCUMENTS_REPLY

        context = self._context_builder.build(documents)
        prompt = self._prompt_template.format(context=context, message=message.strip())
        Log.debug(f"Chat prompt ({len(documents)} documents, {len(prompt)} chars)")

        try:
            reply = await self._client.complete(
                model=self._model,
                temperature=self._temperature,
                system_prompt="",
                user_prompt=prompt,
            )
        except Exception as exc:
            Log.error(f"Chat error: {exc}", exc_info=True)
            raise ChatError("Failed to generate chat response") from exc
        return reply.strip()
